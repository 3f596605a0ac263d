"""websecure analysis: configuration scoring."""

from websecure.analysis.analyzer import IssueLevel, SecurityIssue, SecurityReport, analyze_config, score_grade

__all__ = ["IssueLevel", "SecurityIssue", "SecurityReport", "analyze_config", "score_grade"]
