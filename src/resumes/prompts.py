COVER_LETTER_SYSTEM_PROMPT = """You are a professional cover letter writer for freelance translators and localization specialists."""

COVER_LETTER_USER_PROMPT = """Please write a professional, concise cover letter for a freelance translator named {name}
who is applying for a {target_position} position at {target_company}.

Current Job Title: {job_title}

Skills: {skills}

Recent Projects:
{projects}

Job Description:
{job_description}

The cover letter should be 3-4 paragraphs long, professional, and showcase the candidate's relevant experience.
Format it with "Dear Hiring Manager," at the beginning and "Sincerely, {name}" at the end.
It should be specifically tailored for a translation professional applying to this specific role.
Do not include the resume/CV information in the content.
"""

DEFAULT_JOB_TITLE = "Freelance Translator"
DEFAULT_SKILLS = "translation, proofreading, localization"
DEFAULT_PROJECTS = "Has experience with translation projects across multiple industries."
DEFAULT_JOB_DESCRIPTION = (
    "A position requiring translation services, attention to detail, and excellent communication skills."
)
