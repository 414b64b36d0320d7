"""
Fixed Vocabularies

Process-wide word lists used by the analysis engine:
- Stopwords (plus document-format noise words)
- Technical skill terms (boosted during keyword extraction)
- Content indicator words (tell real prose apart from binary noise)
- Generic placeholder keywords for unreadable text
"""

STOPWORDS = frozenset([
    "i", "me", "my", "myself", "we", "our", "ours", "ourselves", "you", "your", "yours",
    "yourself", "yourselves", "he", "him", "his", "himself", "she", "her", "hers",
    "herself", "it", "its", "itself", "they", "them", "their", "theirs", "themselves",
    "what", "which", "who", "whom", "this", "that", "these", "those", "am", "is", "are",
    "was", "were", "be", "been", "being", "have", "has", "had", "having", "do", "does",
    "did", "doing", "a", "an", "the", "and", "but", "if", "or", "because", "as", "until",
    "while", "of", "at", "by", "for", "with", "through", "during", "before", "after",
    "above", "below", "up", "down", "in", "out", "on", "off", "over", "under", "again",
    "further", "then", "once",
    # Document-format noise
    "page", "pdf", "obj", "endobj", "stream", "endstream",
    "xref", "trailer", "startxref", "contents", "resources", "font", "subtype", "type",
    "length", "filter", "flatedecode", "winansiencoding", "encoding", "basefont",
])

# Ordered: fallback extraction reports hits in this order
TECHNICAL_SKILLS = (
    "javascript", "python", "java", "react", "angular", "vue", "node", "express",
    "mongodb", "mysql", "postgresql", "sql", "html", "css", "typescript", "php",
    "laravel", "django", "flask", "spring", "hibernate", "docker", "kubernetes",
    "aws", "azure", "gcp", "git", "github", "gitlab", "jenkins", "ci/cd", "devops",
    "linux", "ubuntu", "centos", "nginx", "apache", "redis", "elasticsearch",
    "machine learning", "artificial intelligence", "data science", "analytics",
    "tensorflow", "pytorch", "scikit-learn", "pandas", "numpy", "matplotlib",
    "agile", "scrum", "kanban", "jira", "confluence", "slack", "teams",
    "communication", "leadership", "teamwork", "problem solving", "analytical",
    "project management", "time management", "critical thinking", "creativity",
    "reactjs", "nodejs", "expressjs", "frontend", "backend", "fullstack",
    "responsive", "bootstrap", "tailwind", "sass", "less", "webpack", "vite",
    "firebase", "api", "rest", "graphql", "json", "ajax", "jquery", "testing",
    "jest", "cypress", "selenium", "debugging", "optimization", "performance",
)

# Words that indicate real resume / job posting content
CONTENT_INDICATORS = (
    "experience", "skills", "education", "work", "project", "develop", "manage", "team",
    "developer", "engineer", "software", "system", "data", "analysis", "management",
    "position", "role", "responsibilities", "requirements", "qualifications", "candidate",
    "company", "organization", "department", "technical", "business", "professional",
    "years", "knowledge", "ability", "strong", "excellent", "required", "preferred",
    "frontend", "backend", "fullstack", "web", "application", "programming", "coding",
    "javascript", "react", "node", "html", "css", "database", "api", "framework",
)

FALLBACK_KEYWORDS = ("programming", "software", "development", "technical", "computer")
