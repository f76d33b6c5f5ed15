# Static data shown when Gemini is unreachable, so results are never empty.

SALARY_TRENDS = [
    {"role": "Full Stack Developer", "salaryInINR": "₹8,00,000 - ₹15,00,000", "growth": "↗ 18%"},
    {"role": "DevOps Engineer", "salaryInINR": "₹12,00,000 - ₹22,00,000", "growth": "↗ 25%"},
    {"role": "Data Scientist", "salaryInINR": "₹10,00,000 - ₹20,00,000", "growth": "↗ 20%"},
]

LEARNING_RECOMMENDATIONS = [
    {
        "title": "AWS Solutions Architect Associate",
        "type": "Certification",
        "provider": "AWS",
        "duration": "3-4 weeks",
        "priority": "High",
        "url": "https://aws.amazon.com/certification/certified-solutions-architect-associate/",
    },
    {
        "title": "Full Stack Web Development",
        "type": "Course",
        "provider": "Coursera",
        "duration": "6 months",
        "priority": "High",
        "url": "https://www.coursera.org/specializations/full-stack-react",
    },
    {
        "title": "Python for Data Science",
        "type": "Course",
        "provider": "edX",
        "duration": "8 weeks",
        "priority": "Medium",
        "url": "https://www.edx.org/course/python-for-data-science",
    },
]

DEFAULT_ANALYSIS = {
    "skillMatch": {
        "matched": [
            "Problem-solving abilities",
            "Basic programming knowledge",
            "Communication skills",
            "Team collaboration",
            "Technical aptitude",
        ],
        "missing": [
            "Advanced JavaScript frameworks",
            "Cloud computing experience",
            "System design knowledge",
            "DevOps practices",
            "Database optimization",
        ],
        "overallMatchPercentage": 65,
    },
    "skillGapData": [
        {"skill": "JavaScript/React", "current": 60, "required": 85},
        {"skill": "Node.js/Backend", "current": 45, "required": 80},
        {"skill": "AWS/Cloud", "current": 25, "required": 75},
        {"skill": "Database Management", "current": 55, "required": 70},
        {"skill": "DevOps/CI-CD", "current": 20, "required": 65},
        {"skill": "System Design", "current": 30, "required": 75},
        {"skill": "API Development", "current": 50, "required": 80},
    ],
    "recommendations": [
        {
            "title": "React.js Complete Guide",
            "type": "Course",
            "provider": "Udemy",
            "duration": "40 hours",
            "priority": "High",
            "url": "https://www.udemy.com/course/react-the-complete-guide-incl-redux/",
        },
        {
            "title": "AWS Certified Developer",
            "type": "Certification",
            "provider": "AWS",
            "duration": "8 weeks",
            "priority": "High",
            "url": "https://aws.amazon.com/certification/certified-developer-associate/",
        },
        {
            "title": "System Design Interview",
            "type": "Course",
            "provider": "Educative",
            "duration": "6 weeks",
            "priority": "Medium",
            "url": "https://www.educative.io/courses/grokking-the-system-design-interview",
        },
    ],
    "industryDemand": [
        {"skill": "React.js", "demandLevel": "Very High", "growthTrend": "Rapidly Growing"},
        {"skill": "Node.js", "demandLevel": "High", "growthTrend": "Growing"},
        {"skill": "AWS", "demandLevel": "Very High", "growthTrend": "Rapidly Growing"},
        {"skill": "Python", "demandLevel": "High", "growthTrend": "Growing"},
        {"skill": "DevOps", "demandLevel": "Very High", "growthTrend": "Rapidly Growing"},
    ],
    "personalityFit": [
        {"trait": "Technical Communication", "matchScore": 70,
         "jobRequirement": "Clear technical documentation and code reviews"},
        {"trait": "Team Collaboration", "matchScore": 75,
         "jobRequirement": "Agile development and cross-functional teamwork"},
        {"trait": "Continuous Learning", "matchScore": 80,
         "jobRequirement": "Staying updated with latest technologies and best practices"},
    ],
    "careerPathSuggestions": [
        {
            "role": "Senior Full Stack Developer",
            "timeframe": "2-3 years",
            "potentialSalary": "₹12,00,000 - ₹20,00,000",
            "requiredSkills": ["Advanced React", "System Architecture", "Team Leadership", "Performance Optimization"],
        },
        {
            "role": "Technical Lead",
            "timeframe": "4-5 years",
            "potentialSalary": "₹20,00,000 - ₹35,00,000",
            "requiredSkills": ["System Design", "Team Management", "Product Strategy", "Mentoring"],
        },
    ],
    "strengths": [
        "Solid foundation in core programming concepts and problem-solving",
        "Good communication skills suitable for Indian corporate environment",
        "Adaptability and willingness to learn new technologies",
    ],
    "weaknesses": [
        "Limited experience with modern JavaScript frameworks and cloud technologies",
        "Needs improvement in system design and scalability concepts",
    ],
    "competitiveAdvantage": "Strong fundamentals with good learning potential for the rapidly growing Indian tech market",
    "matchScoreReasoning": "Estimated from general profile strengths because the detailed analysis service was unavailable.",
}
