import logging

from fastapi import APIRouter, Request

from app.analytics.records import save_analysis_record
from app.core.rate_limit import rate_limit
from app.schemas.api import (
    AddSkillRequest,
    ATSRequest,
    JDMatchRequest,
    KeywordsRequest,
    KeywordsResponse,
    ReportLinesResponse,
    ReportRequest,
)
from app.schemas.resume import ResumeDocument
from app.schemas.scoring import ATSScore, KeywordMatchResult, ResumeAnalysis
from app.scoring import (
    add_missing_skill,
    analyze_resume,
    build_analysis_record,
    calculate_ats_score,
    calculate_jd_match,
    extract_keywords,
    render_match_report,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/analysis/ats", response_model=ATSScore)
@rate_limit()
async def analysis_ats(request: Request, payload: ATSRequest):
    _ = request
    return calculate_ats_score(payload.resume)


@router.post("/analysis/jd-match", response_model=KeywordMatchResult)
@rate_limit()
async def analysis_jd_match(request: Request, payload: JDMatchRequest):
    _ = request
    return calculate_jd_match(payload.resume, payload.job_description)


@router.post("/analysis/keywords", response_model=KeywordsResponse)
@rate_limit()
async def analysis_keywords(request: Request, payload: KeywordsRequest):
    _ = request
    return KeywordsResponse(keywords=extract_keywords(payload.text))


@router.post("/analysis/report", response_model=ResumeAnalysis)
@rate_limit()
async def analysis_report(request: Request, payload: ReportRequest):
    _ = request
    analysis = analyze_resume(payload.resume, payload.job_description, length_score=payload.length_score)
    if payload.save:
        record = build_analysis_record(analysis, payload.resume, payload.job_description)
        save_analysis_record(record)
        logger.info("analysis_record_saved overall=%s keyword_match=%s", record.overall_score, record.keyword_match)
    return analysis


@router.post("/analysis/report/lines", response_model=ReportLinesResponse)
@rate_limit()
async def analysis_report_lines(request: Request, payload: ReportRequest):
    _ = request
    analysis = analyze_resume(payload.resume, payload.job_description, length_score=payload.length_score)
    return ReportLinesResponse(lines=render_match_report(analysis))


@router.post("/analysis/add-skill", response_model=ResumeDocument)
@rate_limit()
async def analysis_add_skill(request: Request, payload: AddSkillRequest):
    _ = request
    return add_missing_skill(payload.resume, payload.skill)
