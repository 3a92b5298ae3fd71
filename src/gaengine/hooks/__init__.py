from .progress import HistoryProgressTracker, LoggingProgressTracker, ProgressRecord

__all__ = ["HistoryProgressTracker", "LoggingProgressTracker", "ProgressRecord"]
