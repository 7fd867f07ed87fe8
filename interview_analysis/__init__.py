from interview_analysis.engine import InterviewAnalysisEngine, analyze, empty_result

__all__ = ["InterviewAnalysisEngine", "analyze", "empty_result"]
