PROMPT = """
You are a resume optimization expert. Analyze the resume below and provide
specific, actionable recommendations for improvement.
Focus on ATS compatibility, skills, experience descriptions, and formatting.

Current skills: {1}
Scores: Skills {2}/100, Experience {3}/100, Education {4}/100, Format {5}/100

Instructions:
- Provide 5-8 specific recommendations, most important first.
- Return ONLY a JSON array of strings. No keys, no markdown.
- Each recommendation is a single sentence the candidate can act on.

Resume text:
\"\"\"
{0}
\"\"\"
"""
