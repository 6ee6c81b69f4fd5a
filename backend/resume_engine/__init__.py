"""
简历文档生命周期引擎
负责简历的创建（空白/导入/AI 生成）、加锁更新、删除与访问统计
"""

__version__ = "0.1.0"
