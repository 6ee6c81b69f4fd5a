"""
产物存储服务
渲染结果（resumes）和预览图（previews）按 用户/类别/简历ID 存放
"""

import glob
import logging
import os
from abc import ABC, abstractmethod
from typing import List, Optional

from resume_engine.config import get_storage_root

logger = logging.getLogger(__name__)

# 与一份简历关联的所有产物类别
ARTIFACT_CATEGORIES = ("resumes", "previews")


class StorageService(ABC):
    """
    存储服务接口

    生命周期层只依赖 delete_object；put_object 供渲染服务写入产物
    """

    @abstractmethod
    def put_object(self, user_id: int, category: str, resume_id: str, content: bytes, extension: str) -> str:
        """写入产物，返回存储位置"""

    @abstractmethod
    def delete_object(self, user_id: int, category: str, resume_id: str) -> None:
        """删除产物，不存在时什么也不做"""


class LocalStorageService(StorageService):
    """
    本地文件系统存储
    路径格式：{root}/{user_id}/{category}/{resume_id}.{extension}
    """

    def __init__(self, root: Optional[str] = None):
        """
        Args:
            root: 存储根目录，为 None 时读取 STORAGE_ROOT
        """
        self.root = root or get_storage_root()

    def _category_dir(self, user_id: int, category: str) -> str:
        if category not in ARTIFACT_CATEGORIES:
            raise ValueError(f"未知的产物类别: {category}")
        return os.path.join(self.root, str(user_id), category)

    def get_object_paths(self, user_id: int, category: str, resume_id: str) -> List[str]:
        """列出某份简历在某个类别下的所有产物文件"""
        pattern = os.path.join(self._category_dir(user_id, category), f"{glob.escape(resume_id)}.*")
        return sorted(glob.glob(pattern))

    def put_object(self, user_id: int, category: str, resume_id: str, content: bytes, extension: str) -> str:
        """
        写入产物文件（覆盖同名文件）

        Returns:
            文件的绝对路径
        """
        directory = self._category_dir(user_id, category)
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, f"{resume_id}.{extension.lstrip('.')}")
        with open(path, "wb") as f:
            f.write(content)
        return path

    def delete_object(self, user_id: int, category: str, resume_id: str) -> None:
        """删除产物文件；文件不存在时什么也不做"""
        for path in self.get_object_paths(user_id, category, resume_id):
            try:
                os.remove(path)
            except FileNotFoundError:
                continue
            logger.debug("Deleted artifact %s", path)
