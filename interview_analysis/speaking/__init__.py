from interview_analysis.speaking.acoustic import enhance_with_acoustics
from interview_analysis.speaking.patterns import analyze_speaking_patterns

__all__ = ["analyze_speaking_patterns", "enhance_with_acoustics"]
