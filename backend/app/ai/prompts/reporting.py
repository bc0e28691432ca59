from app.ai.prompts.common import PromptSpec
from app.ai.schemas import FieldType

ANALYST = "You are an expert GRC reporting analyst."
REPORT_LABELS = ("Report Title", "Report Type", "Business Unit", "Reporting Scope")
REPORT_ATTRIBUTES = (
    ("period", "Reporting Period"),
    ("audience", "Audience"),
    ("metrics", "Metrics"),
)

CHART_FORMAT = """Format your response as a JSON object with the following structure:
{
  "type": "bar|line|pie|doughnut",
  "title": "Chart title",
  "labels": ["Label 1", "Label 2"],
  "datasets": [{"label": "Series name", "data": [10, 20]}]
}"""

TABLE_FORMAT = """Format your response as a JSON object with the following structure:
{
  "title": "Table title",
  "columns": ["Column 1", "Column 2"],
  "rows": [["Value 1", "Value 2"]]
}"""

CONTROL_EVALUATION_FORMAT = """Format your response as a JSON array of objects with the following structure:
[
  {
    "control": "Control name or code",
    "design_effectiveness": "effective|partially effective|ineffective",
    "operating_effectiveness": "effective|partially effective|ineffective",
    "rationale": "Basis for the rating",
    "recommendation": "Improvement action"
  }
]"""

RISK_CONTROL_MATRIX_FORMAT = """CRITICAL: You must respond with ONLY valid JSON. Follow these rules strictly:
1. Use ONLY double quotes (") for strings, never single quotes (')
2. Escape any quotes within strings using backslash (\\")
3. Do not include any explanatory text before or after the JSON
4. Ensure all strings are properly closed
5. Do not include trailing commas
6. Use the exact format specified below

JSON FORMAT:
{
  "matrix": {
    "name": "string",
    "description": "string",
    "matrix_type": "string",
    "risk_levels": ["string"],
    "control_effectiveness_levels": ["string"]
  },
  "cells": [
    {
      "risk_level": "string",
      "control_effectiveness": "string",
      "position_x": number,
      "position_y": number,
      "color_code": "string",
      "description": "string",
      "action_required": "string"
    }
  ]
}"""


def _report(task: str, output: str, requirements: tuple[str, ...], output_format: str) -> PromptSpec:
    return PromptSpec(
        persona=ANALYST,
        task=task,
        output=output,
        requirements=requirements,
        heading="Report Information",
        labels=REPORT_LABELS,
        attributes=REPORT_ATTRIBUTES,
        output_format=output_format,
    )


PROMPTS = {
    FieldType.CHART_DATA: _report(
        "Generate chart data",
        "JSON object",
        (
            "Choose the chart type that best communicates the data",
            "Use realistic, internally consistent values",
        ),
        CHART_FORMAT,
    ),
    FieldType.TABLE_DATA: _report(
        "Generate table data",
        "JSON object",
        (
            "Choose columns that answer the reporting question",
            "Include 5-10 realistic rows",
        ),
        TABLE_FORMAT,
    ),
    FieldType.CONTROL_EVALUATION: _report(
        "Generate a control effectiveness evaluation",
        "JSON array",
        (
            "Evaluate both design and operating effectiveness for each control",
            "Base ratings on the evidence described in the context",
        ),
        CONTROL_EVALUATION_FORMAT,
    ),
    FieldType.RISK_CONTROL_MATRIX: _report(
        "Generate a risk control matrix",
        "JSON object",
        (
            "Define 3-5 risk levels and 3-5 control effectiveness levels",
            "Provide one cell for every combination of risk level and control effectiveness",
            "Use hex color codes that move from green to red as residual risk increases",
        ),
        RISK_CONTROL_MATRIX_FORMAT,
    ),
}
