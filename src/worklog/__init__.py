"""Worklog - AI diary and work-log analysis."""
