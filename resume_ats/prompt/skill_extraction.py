PROMPT = """
You are a resume parser that extracts skills and keywords.
Extract the technical skills and keywords from the resume text below.

Focus on:
- Programming languages
- Frameworks and libraries
- Tools and technologies
- Soft skills
- Industry-specific terms

Instructions:
- Return ONLY a JSON array of skill names, e.g. ["Python", "Docker", "Leadership"].
- No explanations, no keys, no markdown.
- Only list skills that appear in the resume; never invent any.

Resume text:
\"\"\"
{0}
\"\"\"
"""
