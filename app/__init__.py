"""
PrepWise API
Backend for the job-preparation app: auth, jobs, resumes, AI interviews.

Architecture:
- PostgreSQL: Structured data (users, jobs, resumes, interview sessions)
- MongoDB: Supporting documents (raw resume text, analysis cache, raw feedback)
- Groq / OpenAI: Resume analysis, interview questions and feedback
"""

__version__ = "1.0.0"
