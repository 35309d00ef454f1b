"""
Report generation for validation results.

Renders a merged :class:`ValidationResult` as plain text, markdown or JSON,
and renders the per-language status report used by the ``status`` command.
"""

import json
from typing import List

from .models import ValidationIssue, ValidationResult


OUTPUT_FORMATS = ("text", "markdown", "json")


class ReportGenerator:
    """Formats validation results for console or file output."""

    def __init__(self, output_format: str = "text"):
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format: {output_format} (expected one of {', '.join(OUTPUT_FORMATS)})"
            )
        self.output_format = output_format

    def generate_report(self, result: ValidationResult) -> str:
        if self.output_format == "json":
            return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
        if self.output_format == "markdown":
            return self._markdown_report(result)
        return self._text_report(result)

    def generate_status_report(self, result: ValidationResult) -> str:
        if self.output_format == "json":
            return json.dumps(result.summary.to_dict(), indent=2, ensure_ascii=False)
        if self.output_format == "markdown":
            return self._markdown_status_report(result)
        return self._text_status_report(result)

    def _text_report(self, result: ValidationResult) -> str:
        report_lines = []

        report_lines.append("=" * 60)
        report_lines.append("📊 VALIDATION REPORT")
        report_lines.append("=" * 60)
        if result.success:
            report_lines.append("✅ All validations passed!")
        else:
            report_lines.append("❌ Validation failed")
        report_lines.append("")

        if result.errors:
            report_lines.append("ERRORS")
            report_lines.append("-" * 40)
            report_lines.extend(self._text_issue_lines(result.errors, "❌"))
            report_lines.append("")

        if result.warnings:
            report_lines.append("WARNINGS")
            report_lines.append("-" * 40)
            report_lines.extend(self._text_issue_lines(result.warnings, "⚠️ "))
            report_lines.append("")

        summary = result.summary
        report_lines.append("SUMMARY")
        report_lines.append("-" * 40)
        report_lines.append(f"  Files: {summary.total_files}")
        report_lines.append(f"  Words: {summary.total_words}")
        report_lines.append(f"  Errors: {summary.errors}")
        report_lines.append(f"  Warnings: {summary.warnings}")

        return "\n".join(report_lines)

    @staticmethod
    def _text_issue_lines(issues: List[ValidationIssue], icon: str) -> List[str]:
        lines = []
        for issue in issues:
            lines.append(f"  {icon} {issue.message}")
            if issue.file:
                location = issue.file
                if issue.line is not None:
                    location += f":{issue.line}"
                    if issue.column is not None:
                        location += f":{issue.column}"
                lines.append(f"     File: {location}")
            if issue.context:
                lines.append(f"     Context: {issue.context}")
        return lines

    def _markdown_report(self, result: ValidationResult) -> str:
        lines = ["# Validation Report", ""]
        lines.append("✅ **All validations passed!**" if result.success else "❌ **Validation failed**")
        lines.append("")

        for title, issues, icon in (("Errors", result.errors, "❌"), ("Warnings", result.warnings, "⚠️")):
            if not issues:
                continue
            lines.append(f"## {title}")
            lines.append("")
            for issue in issues:
                lines.append(f"- {icon} {issue.message}")
                if issue.file:
                    lines.append(f"  - File: `{issue.file}`")
                if issue.context:
                    lines.append(f"  - Context: {issue.context}")
            lines.append("")

        summary = result.summary
        lines.append("## Summary")
        lines.append("")
        lines.append(f"- **Files**: {summary.total_files}")
        lines.append(f"- **Words**: {summary.total_words}")
        lines.append(f"- **Errors**: {summary.errors}")
        lines.append(f"- **Warnings**: {summary.warnings}")
        return "\n".join(lines) + "\n"

    def _text_status_report(self, result: ValidationResult) -> str:
        lines = ["🌍 Language Status Report", ""]
        if not result.summary.languages:
            lines.append("No language content found.")
        for language in result.summary.languages:
            status = "✅" if language.errors == 0 else "❌"
            line = f"{status} {language.language}: {language.files} files, {language.words} words"
            if language.errors:
                line += f" ({language.errors} errors)"
            if language.warnings:
                line += f" ({language.warnings} warnings)"
            lines.append(line)
        return "\n".join(lines)

    def _markdown_status_report(self, result: ValidationResult) -> str:
        lines = ["# Language Status Report", ""]
        lines.append("| Language | Files | Words | Errors | Warnings | Status |")
        lines.append("|----------|-------|-------|--------|----------|--------|")
        for language in result.summary.languages:
            status = "✅" if language.errors == 0 else "❌"
            lines.append(
                f"| {language.language} | {language.files} | {language.words} | "
                f"{language.errors} | {language.warnings} | {status} |"
            )
        return "\n".join(lines) + "\n"
