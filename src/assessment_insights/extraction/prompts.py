"""Prompt templates for insights extraction."""

from langchain_core.prompts import PromptTemplate

INSIGHTS_PROMPT = PromptTemplate.from_template(
    "Given the following assessment from a user's performance on the "
    "Professional Data Engineer Certification Prep:\n"
    "{assessment}\n"
    "Please extract key insights and respond in the following JSON schema:\n"
    "{schema}\n"
    "Return only the JSON object. Do not wrap it in ```json or ``` fences. "
    "Avoid any comments or explanations."
)
