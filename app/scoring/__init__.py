from .aggregate import OVERALL_WEIGHTS, calculate_overall_score
from .ats import POSITIVE_FEEDBACK, calculate_ats_score
from .content_strength import calculate_content_strength
from .jd_match import calculate_jd_match
from .keywords import extract_keywords
from .metrics import scan_quantified_metrics
from .overused_words import OVERUSED_PHRASES, detect_overused_words
from .report import analyze_resume, build_analysis_record, render_match_report, score_band
from .skills import add_missing_skill, is_technical_skill

__all__ = [
    "extract_keywords",
    "calculate_ats_score",
    "POSITIVE_FEEDBACK",
    "calculate_jd_match",
    "calculate_content_strength",
    "calculate_overall_score",
    "OVERALL_WEIGHTS",
    "detect_overused_words",
    "OVERUSED_PHRASES",
    "scan_quantified_metrics",
    "analyze_resume",
    "build_analysis_record",
    "render_match_report",
    "score_band",
    "add_missing_skill",
    "is_technical_skill",
]
