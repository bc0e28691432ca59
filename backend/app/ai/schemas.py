from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ProtocolFamily(str, Enum):
    OLLAMA = "ollama"
    OPENAI = "openai"
    CLAUDE = "claude"
    GEMINI = "gemini"


class FieldType(str, Enum):
    """Which piece of business content a generation request targets."""

    # Audit planning
    DESCRIPTION = "description"
    OBJECTIVES = "objectives"
    SCOPE = "scope"
    METHODOLOGY = "methodology"
    EXECUTIVE_SUMMARY = "executive_summary"

    # Controls
    CONTROL_SET_DESCRIPTION = "control_set_description"
    CONTROL_GENERATION = "control_generation"

    # Privacy
    DPIA_DESCRIPTION = "dpia_description"
    DPIA_RISK_ASSESSMENT = "dpia_risk_assessment"
    ROPA_PURPOSE = "ropa_purpose"
    ROPA_LEGAL_BASIS = "ropa_legal_basis"

    # Policy
    POLICY_CONTENT = "policy_content"
    POLICY_TITLE = "policy_title"
    POLICY_DESCRIPTION = "policy_description"
    POLICY_SCOPE = "policy_scope"
    POLICY_VERSION_SUMMARY = "policy_version_summary"
    COMPLIANCE_MAPPING = "compliance_mapping"
    POLICY_TEMPLATE = "policy_template"

    INCIDENT_RESPONSE = "incident_response"
    ESG_PROGRAM = "esg_program"

    # Business continuity
    BCP_PLAN = "bcp_plan"
    BCP_DESCRIPTION = "bcp_description"
    BCP_SCOPE = "bcp_scope"
    BCP_BUSINESS_IMPACT_ANALYSIS = "bcp_business_impact_analysis"
    BCP_RISK_ASSESSMENT = "bcp_risk_assessment"
    BCP_RECOVERY_STRATEGIES = "bcp_recovery_strategies"
    BCP_RESOURCE_REQUIREMENTS = "bcp_resource_requirements"
    BCP_COMMUNICATION_PLAN = "bcp_communication_plan"
    BCP_TESTING_SCHEDULE = "bcp_testing_schedule"
    BCP_MAINTENANCE_SCHEDULE = "bcp_maintenance_schedule"
    BCP_CRITICAL_FUNCTION_DESCRIPTION = "bcp_critical_function_description"
    BCP_RECOVERY_STRATEGY = "bcp_recovery_strategy"
    BCP_TESTING_SCENARIO = "bcp_testing_scenario"

    # Third-party risk
    VENDOR_ASSESSMENT = "vendor_assessment"
    VENDOR_DUE_DILIGENCE_REPORT = "vendor_due_diligence_report"
    VENDOR_CONTRACT_RISK_ANALYSIS = "vendor_contract_risk_analysis"
    VENDOR_RISK_SCORING = "vendor_risk_scoring"
    VENDOR_ASSESSMENT_CRITERIA = "vendor_assessment_criteria"
    VENDOR_MONITORING_PLAN = "vendor_monitoring_plan"
    VENDOR_INCIDENT_RESPONSE = "vendor_incident_response"
    VENDOR_PERFORMANCE_EVALUATION = "vendor_performance_evaluation"
    VENDOR_COMPLIANCE_ASSESSMENT = "vendor_compliance_assessment"
    VENDOR_FINANCIAL_ANALYSIS = "vendor_financial_analysis"
    VENDOR_SECURITY_ASSESSMENT = "vendor_security_assessment"
    VENDOR_OPERATIONAL_ASSESSMENT = "vendor_operational_assessment"

    # IT security
    SECURITY_POLICY = "security_policy"
    VULNERABILITY_ASSESSMENT_REPORT = "vulnerability_assessment_report"
    SECURITY_INCIDENT_RESPONSE_PLAN = "security_incident_response_plan"
    SECURITY_CONTROLS_MAPPING = "security_controls_mapping"
    SECURITY_FRAMEWORK_COMPLIANCE = "security_framework_compliance"
    SECURITY_POLICY_DESCRIPTION = "security_policy_description"
    SECURITY_POLICY_SCOPE = "security_policy_scope"
    SECURITY_POLICY_PROCEDURES = "security_policy_procedures"
    SECURITY_POLICY_ROLES = "security_policy_roles"
    SECURITY_POLICY_INCIDENT_RESPONSE = "security_policy_incident_response"
    SECURITY_POLICY_ACCESS_CONTROL = "security_policy_access_control"
    SECURITY_POLICY_DATA_PROTECTION = "security_policy_data_protection"

    # Training
    TRAINING_PROGRAM = "training_program"
    TRAINING_DESCRIPTION = "training_description"
    LEARNING_OBJECTIVES = "learning_objectives"
    ASSESSMENT_CRITERIA = "assessment_criteria"
    TRAINING_MATERIALS = "training_materials"
    TRAINING_SCHEDULE = "training_schedule"
    CERTIFICATION_REQUIREMENTS = "certification_requirements"
    TRAINING_EVALUATION = "training_evaluation"
    COMPETENCY_MAPPING = "competency_mapping"
    TRAINING_EFFECTIVENESS = "training_effectiveness"
    COMPLIANCE_TRAINING = "compliance_training"
    SKILL_DEVELOPMENT_PLAN = "skill_development_plan"

    # Findings
    FINDING_DESCRIPTION = "finding_description"
    FINDING_ANALYSIS = "finding_analysis"
    FINDING_IMPACT = "finding_impact"
    FINDING_RECOMMENDATIONS = "finding_recommendations"
    FINDING_ACTION_PLAN = "finding_action_plan"
    FINDING_RISK_ASSESSMENT = "finding_risk_assessment"
    FINDING_ROOT_CAUSE = "finding_root_cause"
    FINDING_EVIDENCE = "finding_evidence"
    FINDING_PRIORITY = "finding_priority"
    FINDING_TIMELINE = "finding_timeline"
    FINDING_ASSIGNEE = "finding_assignee"
    FINDING_FOLLOW_UP = "finding_follow_up"

    # Operational resilience
    RESILIENCE_ASSESSMENT = "resilience_assessment"
    RESILIENCE_STRATEGY = "resilience_strategy"
    CRISIS_MANAGEMENT_PLAN = "crisis_management_plan"
    BUSINESS_IMPACT_ANALYSIS = "business_impact_analysis"
    RECOVERY_STRATEGIES = "recovery_strategies"
    RESILIENCE_METRICS = "resilience_metrics"
    SCENARIO_ANALYSIS = "scenario_analysis"
    RESILIENCE_FRAMEWORK = "resilience_framework"
    CAPACITY_ASSESSMENT = "capacity_assessment"
    ADAPTABILITY_PLAN = "adaptability_plan"
    RESILIENCE_MONITORING = "resilience_monitoring"
    CONTINUOUS_IMPROVEMENT = "continuous_improvement"

    # Supply chain
    SUPPLY_CHAIN_RISK = "supply_chain_risk"
    SUPPLY_CHAIN_RISK_ASSESSMENT = "supply_chain_risk_assessment"
    VENDOR_EVALUATION_CRITERIA = "vendor_evaluation_criteria"
    RISK_MITIGATION_STRATEGIES = "risk_mitigation_strategies"
    SUPPLY_CHAIN_MAPPING = "supply_chain_mapping"
    VENDOR_TIER_CLASSIFICATION = "vendor_tier_classification"
    RISK_PROPAGATION_ANALYSIS = "risk_propagation_analysis"
    SUPPLY_CHAIN_RESILIENCE_SCORING = "supply_chain_resilience_scoring"
    DISRUPTION_RESPONSE_PLAN = "disruption_response_plan"
    SUPPLIER_DEVELOPMENT_PROGRAM = "supplier_development_program"
    PERFORMANCE_MONITORING_FRAMEWORK = "performance_monitoring_framework"
    COMPLIANCE_ASSESSMENT_CRITERIA = "compliance_assessment_criteria"
    FINANCIAL_STABILITY_ANALYSIS = "financial_stability_analysis"

    # Reporting
    RISK_CONTROL_MATRIX = "risk_control_matrix"
    CHART_DATA = "chart_data"
    TABLE_DATA = "table_data"
    CONTROL_EVALUATION = "control_evaluation"


# Field types whose answer is a JSON array of strings.
LIST_FIELD_TYPES = frozenset({FieldType.OBJECTIVES, FieldType.LEARNING_OBJECTIVES})


class ProviderDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: ProtocolFamily
    description: str
    requires_api_key: bool
    models: tuple[str, ...]
    default_model: str


class OllamaStatus(BaseModel):
    is_running: bool
    available_models: list[str] = Field(default_factory=list)
    error: str | None = None


class AuditData(BaseModel):
    title: str | None = None
    audit_type: str | None = None
    business_unit: str | None = None
    scope: str | None = None


class ControlSetData(BaseModel):
    name: str | None = None
    framework: str | None = None
    audit_title: str | None = None
    audit_type: str | None = None


class PrivacyData(BaseModel):
    title: str | None = None
    type: Literal["dpia", "ropa"] | None = None
    industry: str | None = None
    data_subjects: list[str] = Field(default_factory=list)
    data_categories: list[str] = Field(default_factory=list)
    risk_level: str | None = None


class GenerationRequest(BaseModel):
    provider: str = ""
    model: str = ""
    prompt: str = ""
    context: str = ""
    field_type: FieldType = FieldType.DESCRIPTION
    audit_data: AuditData = Field(default_factory=AuditData)
    control_set_data: ControlSetData | None = None
    privacy_data: PrivacyData | None = None
    entity_data: dict[str, Any] = Field(
        default_factory=dict,
        description="Domain attributes for the target entity (plan name, vendor, severity, ...).",
    )
    template_id: str | None = None
    industry: str | None = None
    framework: str | None = None
    temperature: float | None = Field(default=None, ge=0, le=1)
    max_tokens: int | None = Field(default=None, gt=0)
    api_key: str | None = None
    base_url: str | None = None


class GenerationResponse(BaseModel):
    success: bool
    content: str | list[str] = ""
    error: str | None = None
    tokens_used: int | None = None
    model: str | None = None
    provider: str | None = None


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    provider: str
    model: str
    messages: list[ChatMessage] = Field(..., min_length=1)
    api_key: str | None = None
    base_url: str | None = None
    temperature: float | None = Field(default=None, ge=0, le=1)
    max_tokens: int | None = Field(default=None, gt=0)


class ConnectionTestRequest(BaseModel):
    provider: str
    model: str
    api_key: str | None = None
    base_url: str | None = None


class GenerationStats(BaseModel):
    total_generations: int = 0
    successful_generations: int = 0
    failed_generations: int = 0
    average_tokens_used: float = 0.0
    most_used_provider: str = ""
    most_used_field_type: str = ""


class ConnectionTestResult(BaseModel):
    success: bool


class CostEstimate(BaseModel):
    provider: str
    model: str
    tokens: int
    formatted_tokens: str
    estimated_cost: float
