"""Keyword-based technology and domain detection.

Content is tested against two ordered tables of named patterns.  Each
pattern is a presence test: a name is detected when its pattern matches
anywhere in the content.  Detected names are then mapped through static
tables to the instruction, chatmode and constitution documents an agent
should load, together with a saturating confidence score:

    confidence = min(min(n_tech * 0.3, 0.6) + min(n_domain * 0.2, 0.4), 1.0)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from speckit_mcp.detection.models import ContextReport, DetectionResult, Recommendations
from speckit_mcp.tables.models import DetectionTables

logger = logging.getLogger(__name__)

TECHNOLOGY_WEIGHT = 0.3
TECHNOLOGY_CAP = 0.6
DOMAIN_WEIGHT = 0.2
DOMAIN_CAP = 0.4


def _dedupe(values: Iterable[str]) -> list[str]:
    """Drop repeats while keeping first-seen order."""
    return list(dict.fromkeys(values))


def calculate_confidence(technology_count: int, domain_count: int) -> float:
    tech = min(technology_count * TECHNOLOGY_WEIGHT, TECHNOLOGY_CAP)
    domain = min(domain_count * DOMAIN_WEIGHT, DOMAIN_CAP)
    return min(tech + domain, 1.0)


class ContextDetector:
    """Classifies content and recommends documents to load."""

    def __init__(self, tables: DetectionTables) -> None:
        self.tables = tables
        self._technology_patterns = tables.compiled_technologies()
        self._domain_patterns = tables.compiled_domains()

    # -- detection ---------------------------------------------------------

    def detect_technologies(self, content: str) -> list[str]:
        return [
            name for name, pattern in self._technology_patterns.items()
            if pattern.search(content)
        ]

    def detect_domains(self, content: str, explicit_domains: Sequence[str] = ()) -> list[str]:
        """Explicit domains first (as given), then newly matched ones in table order."""
        detected = list(explicit_domains)
        for name, pattern in self._domain_patterns.items():
            if name not in detected and pattern.search(content):
                detected.append(name)
        return detected

    # -- mapping -----------------------------------------------------------

    def map_instructions(self, technologies: Sequence[str]) -> list[str]:
        mapped = [self.tables.base_instruction]
        for tech in technologies:
            instruction = self.tables.technology_instructions.get(tech)
            if instruction:
                mapped.append(instruction)
        return _dedupe(mapped)

    def map_chatmodes(self, domains: Sequence[str]) -> list[str]:
        mapped = [self.tables.default_chatmode]
        for domain in domains:
            mapped.extend(self.tables.domain_chatmodes.get(domain, []))
        return _dedupe(mapped)

    def constitutional_domains(self, domains: Sequence[str]) -> list[str]:
        mapping = self.tables.domain_constitutions
        return [mapping[d] for d in domains if mapping.get(d)]

    # -- recommendations ---------------------------------------------------

    def analyze(self, content: str, explicit_domains: Sequence[str] = ()) -> DetectionResult:
        technologies = self.detect_technologies(content)
        domains = self.detect_domains(content, explicit_domains)
        return DetectionResult(
            detected_technologies=technologies,
            detected_domains=domains,
            recommended_instructions=self.map_instructions(technologies),
            recommended_chatmodes=self.map_chatmodes(domains),
            confidence_score=calculate_confidence(len(technologies), len(domains)),
        )

    @staticmethod
    def workflow_suggestions(detection: DetectionResult) -> list[str]:
        suggestions: list[str] = []
        if detection.detected_technologies:
            suggestions.append("Load technology-specific instructions first")
        if "security" in detection.detected_domains:
            suggestions.append("Apply security constitutional principles")
            suggestions.append("Use security chatmode for sensitive operations")
        if "testing" in detection.detected_domains:
            suggestions.append("Enforce TDD constitutional requirements")
            suggestions.append("Switch to QA chatmode for test strategy")
        if "kubernetes" in detection.detected_technologies:
            suggestions.append("Load DevOps best practices")
            suggestions.append("Apply deployment constitutional principles")
        return suggestions

    def priority_order(self, detection: DetectionResult) -> list[str]:
        base = self.tables.base_instruction
        order = [self.tables.core_constitution, base]
        for domain in self.tables.critical_domains:
            if domain in detection.detected_domains:
                order.append(f"{domain}.constitution.md")
        order.extend(i for i in detection.recommended_instructions if i != base)
        order.extend(detection.recommended_chatmodes)
        return order

    def recommend(self, detection: DetectionResult) -> Recommendations:
        return Recommendations(
            instructions=list(detection.recommended_instructions),
            chatmodes=list(detection.recommended_chatmodes),
            constitutional_domains=self.constitutional_domains(detection.detected_domains),
            workflow_suggestions=self.workflow_suggestions(detection),
            priority_order=self.priority_order(detection),
        )

    def detect(self, content: str, explicit_domains: Sequence[str] = ()) -> ContextReport:
        detection = self.analyze(content, explicit_domains)
        recommendations = self.recommend(detection)
        logger.debug(
            "Detected technologies=%s domains=%s confidence=%.2f",
            detection.detected_technologies,
            detection.detected_domains,
            detection.confidence_score,
        )
        return ContextReport(
            detection_results=detection,
            recommendations=recommendations,
            instructions_to_load=list(recommendations.instructions),
            chatmodes_to_load=list(recommendations.chatmodes),
            constitutional_domains=list(recommendations.constitutional_domains),
        )
