"""
AI 简历生成的提示词
"""

RESUME_SYSTEM_PROMPT = """You generate a resume.
Write in the candidate's own voice, keep every fact grounded in the existing resume,
and emphasise what is relevant to the job description. Never invent employers,
degrees or dates. Return only the fields required by the output schema."""

RESUME_GENERATION_PROMPT = """Create a new resume from my existing resume for the job description.

Here is my current resume (JSON, may be empty):
{existing_resume}

Here is the job description:
{job_description}"""

NO_EXISTING_RESUME = "null"
