from timeline_core.services.scheduling import ScheduleAnalyzer, analyze_schedule

__all__ = ["ScheduleAnalyzer", "analyze_schedule"]
