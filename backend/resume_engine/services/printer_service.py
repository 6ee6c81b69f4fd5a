"""
渲染服务接口
PDF / 预览图的具体渲染不在本引擎范围内，由外部实现注入
"""

from abc import ABC, abstractmethod

from resume_engine.models.resume import Resume


class PrinterService(ABC):
    """渲染服务：根据完整简历生成可下载文件和预览图"""

    @abstractmethod
    def print_resume(self, resume: Resume) -> str:
        """渲染可下载文件，返回下载 URL"""

    @abstractmethod
    def print_preview(self, resume: Resume) -> str:
        """渲染预览图，返回预览 URL"""
