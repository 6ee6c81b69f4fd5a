"""
访问统计服务
每次符合条件的匿名访问只自增一次，缺失的统计行读作 0
"""

from resume_engine.repositories.statistics_repository import StatisticsRepository
from resume_engine.schema.requests import ResumeStatisticsView


class StatisticsTracker:
    """简历浏览量 / 下载量统计"""

    def __init__(self, statistics_repository: StatisticsRepository):
        self.statistics_repository = statistics_repository

    def record_view(self, resume_id: str) -> None:
        """浏览量 +1（不存在统计行时创建 views=1, downloads=0）"""
        self.statistics_repository.increment(resume_id, "views")

    def record_download(self, resume_id: str) -> None:
        """下载量 +1（不存在统计行时创建 views=0, downloads=1）"""
        self.statistics_repository.increment(resume_id, "downloads")

    def get_statistics(self, resume_id: str) -> ResumeStatisticsView:
        """获取统计数据，从不因统计行缺失而失败"""
        stats = self.statistics_repository.get_by_resume_id(resume_id)
        if stats is None:
            return ResumeStatisticsView(views=0, downloads=0)
        return ResumeStatisticsView(views=stats.views, downloads=stats.downloads)
