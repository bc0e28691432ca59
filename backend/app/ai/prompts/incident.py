from app.ai.prompts.common import PromptSpec
from app.ai.schemas import FieldType

PROMPTS = {
    FieldType.INCIDENT_RESPONSE: PromptSpec(
        persona="You are an expert incident response manager experienced with NIST SP 800-61 and ISO 27035.",
        task="Generate an incident response plan",
        output="incident response content",
        requirements=(
            "Cover detection, analysis, containment, eradication, recovery, and post-incident review",
            "Define roles, escalation paths, and communication responsibilities",
            "Include regulatory notification considerations and timelines",
            "Make the steps specific to the incident type and severity",
        ),
        words=(300, 600),
        heading="Incident Information",
        labels=("Incident Title", "Incident Type", "Business Unit", "Affected Scope"),
        attributes=(
            ("severity", "Severity"),
            ("status", "Status"),
            ("affected_systems", "Affected Systems"),
            ("detected_at", "Detected At"),
        ),
    ),
    FieldType.ESG_PROGRAM: PromptSpec(
        persona="You are an expert ESG and sustainability professional familiar with GRI, SASB and TCFD reporting.",
        task="Generate an ESG program description",
        output="ESG program content",
        requirements=(
            "Address environmental, social, and governance pillars",
            "Define measurable targets and key performance indicators",
            "Describe governance oversight and reporting cadence",
            "Align the program with stakeholder expectations and disclosure frameworks",
        ),
        words=(300, 600),
        heading="ESG Program Information",
        labels=("Program Name", "Program Type", "Business Unit", "Scope"),
        attributes=(
            ("focus_areas", "Focus Areas"),
            ("reporting_framework", "Reporting Framework"),
            ("targets", "Targets"),
        ),
    ),
}
