SALARY_TRENDS_PROMPT = """As an AI career advisor specializing in the Indian tech job market, provide current salary trends for top tech roles in India for 2024-2025.

Focus on roles that are in high demand in India's tech hubs (Bangalore, Hyderabad, Pune, Chennai, Mumbai, NCR).
Consider factors like:
- Current market demand in Indian IT companies (TCS, Infosys, Wipro, HCL, etc.)
- Emerging roles in Indian startups and unicorns
- Remote work impact on Indian salaries
- Skills shortage in Indian market

Return ONLY a valid JSON array with exactly 3 objects, each containing:
{
  "role": "specific job role relevant to Indian market",
  "salaryInINR": "salary range in Indian Rupees with ₹ symbol (be realistic for Indian market)",
  "growth": "salary growth trend with arrow symbol (↗ for up, → for stable, ↘ for down) followed by percentage"
}

Example format:
[
  {"role": "Full Stack Developer", "salaryInINR": "₹8,00,000 - ₹15,00,000", "growth": "↗ 18%"},
  {"role": "DevOps Engineer", "salaryInINR": "₹12,00,000 - ₹22,00,000", "growth": "↗ 25%"},
  {"role": "Data Scientist", "salaryInINR": "₹10,00,000 - ₹20,00,000", "growth": "↗ 20%"}
]"""


LEARNING_RECOMMENDATIONS_PROMPT = """As an AI career advisor specializing in the Indian tech market, provide learning recommendations that are specifically valuable for professionals in India's job market.

Consider:
- Skills in high demand by Indian IT companies and startups
- Certifications valued by Indian employers
- Cost-effective learning options accessible in India
- Skills that offer good ROI in Indian salary negotiations
- Remote work skills relevant to Indian professionals working with global teams

Return ONLY a valid JSON array with exactly 3 objects, each containing:
{
  "title": "specific course/certification name",
  "type": "Course, Certification, or Workshop",
  "provider": "platform or organization (prefer options accessible in India)",
  "duration": "realistic time estimate",
  "priority": "High, Medium, or Low based on Indian market demand",
  "url": "valid, accessible URL"
}

Focus on skills like: Cloud Computing, AI/ML, Full Stack Development, DevOps, Data Analytics, Cybersecurity."""


ANALYSIS_TEMPLATE = """As an AI career advisor and talent acquisition expert specializing in the Indian job market, perform a comprehensive analysis of the following resume and job description.

IMPORTANT: Base your analysis on Indian job market standards, salary expectations, skill demands, and career progression patterns common in India's tech industry.

RESUME:
{resume}

JOB DESCRIPTION:
{jd}

Analyze this with the following Indian market context:
- Indian IT industry standards and expectations
- Skills valued by Indian employers (TCS, Infosys, Wipro, Accenture, startups, unicorns)
- Indian salary ranges and career progression
- Remote work trends in India
- Skills shortage in Indian market
- Indian educational background recognition
- Communication skills for Indian work environment

Return ONLY a valid JSON object with these exact properties:

{{
  "skillMatch": {{
    "matched": ["skill1", "skill2", "skill3"],
    "missing": ["missing_skill1", "missing_skill2"],
    "overallMatchPercentage": 75,
    "explanation": "Brief explanation for the match percentage"
  }},
  "skillGapData": [
    {{"skill": "React.js", "current": 70, "required": 85}},
    {{"skill": "Node.js", "current": 60, "required": 80}},
    {{"skill": "AWS", "current": 40, "required": 75}}
  ],
  "recommendations": [
    {{
      "title": "AWS Solutions Architect",
      "type": "Certification",
      "provider": "AWS",
      "duration": "4 weeks",
      "priority": "High",
      "url": "https://aws.amazon.com/certification/"
    }}
  ],
  "industryDemand": [
    {{"skill": "React.js", "demandLevel": "Very High", "growthTrend": "Rapidly Growing"}},
    {{"skill": "Python", "demandLevel": "High", "growthTrend": "Growing"}}
  ],
  "personalityFit": [
    {{"trait": "Technical Communication", "matchScore": 80, "jobRequirement": "Excellent written and verbal communication"}},
    {{"trait": "Team Collaboration", "matchScore": 75, "jobRequirement": "Strong teamwork in agile environment"}},
    {{"trait": "Problem Solving", "matchScore": 85, "jobRequirement": "Analytical thinking and debugging skills"}}
  ],
  "careerPathSuggestions": [
    {{
      "role": "Senior Software Engineer",
      "timeframe": "2-3 years",
      "potentialSalary": "₹15,00,000 - ₹25,00,000",
      "requiredSkills": ["Advanced React", "System Design", "Leadership"]
    }}
  ],
  "strengths": ["Strong technical foundation in modern web technologies"],
  "weaknesses": ["Limited experience with cloud technologies"],
  "competitiveAdvantage": "One sentence on what sets this candidate apart",
  "matchScoreReasoning": "A brief and precise explanation (1-2 sentences) for the overall match percentage, focusing on the most significant matching strengths and missing skills."
}}

Rules:
- overallMatchPercentage is an integer from 0 to 100.
- A skill must not appear in both "matched" and "missing".
- Be specific and realistic with skill names, use actual technologies mentioned in the resume/job description.
- Ensure skill gap data uses real skill names from the analysis.
- Make salary ranges realistic for Indian market.
- Output ONLY valid JSON, no markdown or explanations."""


def build_analysis_prompt(resume: str, jd: str) -> str:
    return ANALYSIS_TEMPLATE.format(resume=resume, jd=jd)
