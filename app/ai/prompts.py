from __future__ import annotations

from app.schemas.resume import JobDescription, ResumeDocument

_RESUME_JSON_SHAPE = """{
  "personalInfo": {"fullName": "", "email": "", "phone": "", "location": "", "linkedin": "", "portfolio": ""},
  "summary": "",
  "experience": [
    {"company": "", "position": "", "startDate": "", "endDate": "", "location": "", "current": false, "description": [""]}
  ],
  "education": [{"degree": "", "school": "", "gpa": "", "graduationDate": ""}],
  "skills": {"technical": [""], "soft": [""]},
  "projects": [{"name": "", "description": ""}],
  "certifications": [{"name": ""}],
  "achievements": [{"name": ""}]
}"""


def summary_prompt(resume: ResumeDocument) -> str:
    experience = ", ".join(f"{e.position} at {e.company}" for e in resume.experience)
    return (
        "Write a professional resume summary of 2-3 sentences (at most 150 words).\n\n"
        f"Name: {resume.personal_info.full_name}\n"
        f"Experience: {experience}\n"
        f"Skills: {', '.join(resume.skills.technical[:10])}\n"
        f"Education: {', '.join(e.degree for e in resume.education)}\n\n"
        "Highlight key achievements, mention relevant skills, use action verbs and "
        "quantifiable results, and keep it ATS friendly.\n"
        "Return only the summary text, without explanations or markdown."
    )


def bullet_points_prompt(position: str, company: str, bullets: list[str]) -> str:
    current = "\n".join(f"- {bullet}" for bullet in bullets)
    return (
        "Rewrite these resume bullet points to be more impactful and ATS friendly.\n\n"
        f"Position: {position}\n"
        f"Company: {company}\n"
        f"Current bullets:\n{current}\n\n"
        "Start with action verbs, include numbers, percentages or dollar amounts, "
        "focus on achievements and keep each bullet to one or two lines.\n"
        'Return only a JSON array of strings, e.g. ["Led a team of 5 engineers...", "Increased revenue by 42%..."].'
    )


def cover_letter_prompt(resume: ResumeDocument, job: JobDescription) -> str:
    experience = "\n".join(
        f"{e.position} at {e.company} ({e.start_date} - {e.end_date})" for e in resume.experience
    )
    education = ", ".join(f"{e.degree} from {e.school}" for e in resume.education)
    return (
        "Write a professional cover letter from this resume for this job.\n\n"
        "RESUME:\n"
        f"Name: {resume.personal_info.full_name}\n"
        f"Summary: {resume.summary}\n"
        f"Experience: {experience}\n"
        f"Skills: {', '.join(resume.skills.technical)}\n"
        f"Education: {education}\n\n"
        "JOB DESCRIPTION:\n"
        f"Title: {job.title}\n"
        f"Company: {job.company or 'Company'}\n"
        f"Description: {job.description}\n\n"
        "Use 3-4 paragraphs (300-400 words) in a professional tone. Address the hiring manager "
        '("Dear Hiring Manager" if unknown), connect the experience to the requirements, close by '
        "asking for an interview and sign off with \"Sincerely\" and the candidate's name.\n"
        "Return only the cover letter text, without explanations or markdown."
    )


def improve_text_prompt(text: str) -> str:
    return (
        "Improve this resume text for grammar, tone and readability while keeping its meaning:\n\n"
        f"{text}\n\n"
        "Fix grammar and spelling, remove repetition, use stronger action verbs and keep it concise.\n"
        "Return only the improved text, without explanations."
    )


def quantify_prompt(achievement: str) -> str:
    return (
        "Rewrite this resume achievement to be more impactful with quantifiable metrics:\n\n"
        f'Original: "{achievement}"\n\n'
        "Add specific numbers, percentages or dollar amounts where possible, use a strong action verb "
        "and keep it to one or two lines. If it already has numbers, keep them and improve the wording.\n"
        "Return only the improved achievement text, without explanations."
    )


def parse_resume_prompt(text: str) -> str:
    return (
        "Extract all information from the resume text below and return it as a JSON object "
        f"with exactly this structure:\n\n{_RESUME_JSON_SHAPE}\n\n"
        f"Resume text:\n{text}\n\n"
        "Return only valid JSON with no markdown. Use an empty string or empty array for anything not found."
    )
