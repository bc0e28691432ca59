from app.ai.prompts.common import PromptSpec
from app.ai.schemas import FieldType

TRAINING_EXPERT = "You are an expert learning and development professional specializing in GRC training programs."
TRAINING_LABELS = ("Program Title", "Training Type", "Business Unit", "Scope")
TRAINING_ATTRIBUTES = (
    ("target_audience", "Target Audience"),
    ("delivery_method", "Delivery Method"),
    ("duration", "Duration"),
    ("compliance_requirements", "Compliance Requirements"),
)

LEARNING_OBJECTIVES_FORMAT = (
    "Format: Return only the learning objectives as a clean JSON array of strings.\n"
    'Example: ["Identify the main categories of personal data", "Apply the incident reporting procedure"]'
)

_ENTRIES: dict[FieldType, tuple[str, str, tuple[str, ...], tuple[int, int] | None]] = {
    FieldType.TRAINING_PROGRAM: (
        "Generate a complete training program outline",
        "training program",
        (
            "Include modules, learning outcomes, delivery methods, and assessment approach",
            "Sequence modules from foundational to advanced",
        ),
        (400, 800),
    ),
    FieldType.TRAINING_DESCRIPTION: (
        "Generate a training program description",
        "description text",
        ('Explain what "{subject}" covers, who should attend, and the benefits',),
        (100, 250),
    ),
    FieldType.ASSESSMENT_CRITERIA: (
        "Generate assessment criteria for the training",
        "assessment criteria",
        ("Define passing thresholds, question types, and practical evaluation rubrics",),
        (150, 300),
    ),
    FieldType.TRAINING_MATERIALS: (
        "Generate an outline of training materials",
        "training materials outline",
        ("List slides, handouts, case studies, and exercises per module",),
        (250, 500),
    ),
    FieldType.TRAINING_SCHEDULE: (
        "Generate a training schedule",
        "training schedule",
        ("Propose sessions, durations, cohorts, and refresher intervals",),
        (150, 300),
    ),
    FieldType.CERTIFICATION_REQUIREMENTS: (
        "Generate certification requirements",
        "certification requirements",
        ("Define prerequisites, assessment requirements, validity period, and renewal",),
        (150, 300),
    ),
    FieldType.TRAINING_EVALUATION: (
        "Generate a training evaluation approach",
        "evaluation approach",
        ("Apply the Kirkpatrick four levels with concrete measures for each level",),
        (200, 400),
    ),
    FieldType.COMPETENCY_MAPPING: (
        "Generate a competency mapping",
        "competency mapping",
        ("Map roles to required competencies and proficiency levels, and link them to modules",),
        (200, 400),
    ),
    FieldType.TRAINING_EFFECTIVENESS: (
        "Generate a training effectiveness analysis",
        "effectiveness analysis",
        ("Define metrics such as completion, assessment scores, incident reduction, and behavior change",),
        (200, 400),
    ),
    FieldType.COMPLIANCE_TRAINING: (
        "Generate compliance training content",
        "compliance training content",
        (
            "Explain the regulatory obligations in practical terms",
            "Include realistic scenarios and do/don't guidance",
        ),
        (400, 800),
    ),
    FieldType.SKILL_DEVELOPMENT_PLAN: (
        "Generate a skill development plan",
        "skill development plan",
        ("Define current and target skill levels, development activities, and milestones",),
        (200, 400),
    ),
}

PROMPTS = {
    field_type: PromptSpec(
        persona=TRAINING_EXPERT,
        task=task,
        output=output,
        requirements=requirements,
        words=words,
        heading="Training Information",
        labels=TRAINING_LABELS,
        attributes=TRAINING_ATTRIBUTES,
    )
    for field_type, (task, output, requirements, words) in _ENTRIES.items()
}

PROMPTS[FieldType.LEARNING_OBJECTIVES] = PromptSpec(
    persona=TRAINING_EXPERT,
    task="Generate specific, measurable learning objectives",
    output="JSON array of learning objectives",
    requirements=(
        "Create 4-6 learning objectives using Bloom's taxonomy action verbs",
        "Each objective must be observable and assessable",
        'Make them specific to "{subject}" and the target audience',
    ),
    heading="Training Information",
    labels=TRAINING_LABELS,
    attributes=TRAINING_ATTRIBUTES,
    output_format=LEARNING_OBJECTIVES_FORMAT,
)
