"""
Domain-independent word lists used by the content generators.

Industry-specific vocabulary lives in data/industries.yaml instead.
"""

SOFT_SKILLS = (
    "Team Leadership",
    "Project Management",
    "Communication",
    "Problem Solving",
    "Critical Thinking",
    "Time Management",
    "Collaboration",
    "Adaptability",
    "Creativity",
    "Decision Making",
    "Conflict Resolution",
    "Presentation Skills",
)

ACTION_VERBS = (
    "Developed",
    "Implemented",
    "Designed",
    "Led",
    "Managed",
    "Created",
    "Built",
    "Established",
    "Improved",
    "Optimized",
    "Launched",
    "Spearheaded",
)

ADJECTIVES = (
    "innovative",
    "scalable",
    "robust",
    "efficient",
    "modern",
    "reliable",
    "strategic",
    "streamlined",
    "comprehensive",
    "flexible",
    "integrated",
    "automated",
)

# Bullet filler tokens, grouped by the sentence template that uses them
IMPROVEMENT_AREAS = ("efficiency", "performance", "productivity", "user satisfaction")
DELIVERY_VERBS = ("implement", "design", "develop", "deploy")
DELIVERABLES = ("systems", "solutions", "frameworks", "approaches")
COLLABORATION_PHRASES = ("Collaborated with", "Partnered with", "Worked closely with")
STAKEHOLDERS = ("stakeholders", "clients", "team members", "executives")
OUTCOME_VERBS = ("deliver", "enhance", "optimize", "transform")

UNDERGRADUATE_DEGREES = ("Bachelor's", "Associate's")
ADVANCED_DEGREES = ("Master's", "MBA", "Ph.D.")
BACHELORS = "Bachelor's"

INSTITUTION_KINDS = ("College", "University", "Institute")
FOCUS_LABELS = ("Relevant coursework", "Specialized in", "Focus area")
ACTIVITY_VERBS = ("Member of", "Participated in", "Active in")
ACTIVITY_GROUPS = ("Student Association", "Honor Society", "Research Group", "Campus Organization")

TECHNICAL_SKILLS_LABEL = "Technical Skills"
SOFT_SKILLS_LABEL = "Soft Skills"
