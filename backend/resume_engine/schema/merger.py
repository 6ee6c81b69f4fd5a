"""
文档合并器

按 schema 递归合并：
- 覆盖数据中的嵌套对象（对应子模型字段）递归合并
- 列表和标量整体替换，不做逐元素合并
- 覆盖数据中出现 schema 之外的键直接报错
合并结果必须通过完整 ResumeData 校验。
"""

import copy
import typing
from typing import Any, Dict, Mapping, Optional, Type, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from resume_engine.errors import ValidationError
from resume_engine.schema.resume_data import ResumeData


def _nested_model(annotation: Any) -> Optional[Type[BaseModel]]:
    """字段类型是（可选的）子模型时返回该模型类，否则返回 None"""
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    if typing.get_origin(annotation) is Union:
        models = [arg for arg in typing.get_args(annotation) if isinstance(arg, type) and issubclass(arg, BaseModel)]
        if len(models) == 1:
            return models[0]
    return None


def _as_mapping(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(exclude_unset=True)
    return value


class DocumentMerger:
    """
    ResumeData 合并器（纯函数，不修改输入）

    使用示例：
        merged = DocumentMerger().merge(default_resume_data(), {"basics": {"name": "Kevin"}})
    """

    def __init__(self, model: Type[BaseModel] = ResumeData):
        self.model = model

    def merge(self, base: BaseModel, overrides: Union[Mapping[str, Any], BaseModel]) -> BaseModel:
        """
        将局部覆盖数据合并到完整文档上

        Args:
            base: 完整文档
            overrides: 局部覆盖数据（dict 或 pydantic 模型）

        Returns:
            新的完整文档

        Raises:
            ValidationError: 覆盖数据含未知字段，或合并结果未通过 schema 校验
        """
        merged = self._merge_dict(self.model, base.model_dump(), _as_mapping(overrides), path="")
        try:
            return self.model.model_validate(merged)
        except PydanticValidationError as e:
            raise ValidationError(
                "合并后的简历数据未通过校验",
                {"errors": e.errors(include_url=False, include_context=False)}
            ) from e

    def _merge_dict(
        self,
        model: Type[BaseModel],
        base: Dict[str, Any],
        overrides: Mapping[str, Any],
        path: str
    ) -> Dict[str, Any]:
        if not isinstance(overrides, Mapping):
            raise ValidationError(f"'{path or '<root>'}' 需要对象类型", {"path": path})

        result = dict(base)
        for key, value in overrides.items():
            field_path = f"{path}.{key}" if path else key
            field = model.model_fields.get(key)
            if field is None:
                raise ValidationError(f"未知字段: {field_path}", {"path": field_path})

            value = _as_mapping(value)
            nested = _nested_model(field.annotation)
            if nested is not None and isinstance(value, Mapping) and isinstance(base.get(key), dict):
                result[key] = self._merge_dict(nested, base[key], value, field_path)
            else:
                result[key] = copy.deepcopy(value)

        return result
