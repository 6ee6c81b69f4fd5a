"""
错误分类模块
所有对外暴露的业务异常都继承自 ResumeEngineError，携带结构化信息
"""

from typing import Any, Dict, Optional


class ResumeEngineError(Exception):
    """
    业务异常基类

    Attributes:
        message: 可读的错误描述
        details: 附加的结构化上下文（如 resume_id、slug）
    """

    code = "resume_engine_error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """转换为可序列化的错误对象"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(ResumeEngineError):
    """找不到匹配的文档（或文档不属于该用户）"""

    code = "not_found"


class LockedError(ResumeEngineError):
    """文档已锁定，拒绝修改"""

    code = "resume_locked"


class ConflictError(ResumeEngineError):
    """slug 或身份冲突"""

    code = "conflict"


class ValidationError(ResumeEngineError):
    """输入数据不合法，或引用的文档无法解析"""

    code = "validation_error"


class GenerationError(ResumeEngineError):
    """外部生成服务失败，或返回的数据不符合 schema"""

    code = "generation_error"
