"""Built-in PII patterns — content regexes and suspicious column names.

Patterns are intentionally broad: they flag likely PII for human review,
and false positives are preferred over false negatives.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from piiscan.scanner.models import RiskLevel


@dataclass(frozen=True)
class ContentPattern:
    """A content-level detection pattern with compiled regex and metadata."""

    name: str
    description: str
    risk: RiskLevel
    regex: re.Pattern[str]

    def find_all(self, text: str) -> list[str]:
        """Every non-overlapping match in *text*, left to right."""
        return [m.group(0) for m in self.regex.finditer(text)]


@dataclass(frozen=True)
class ColumnNameRule:
    """A heuristic over column names that suggests a PII field."""

    regex: re.Pattern[str]
    risk: RiskLevel
    label: str

    def matches(self, column: str) -> bool:
        return self.regex.search(column) is not None


def name_rule(vocabulary: str, risk: RiskLevel, label: str) -> ColumnNameRule:
    """Build a case-insensitive column-name rule.

    Terms match on word boundaries, where ``_``, ``.``, ``-`` and spaces
    count as separators, so ``customer_email`` matches ``email``.
    """
    regex = re.compile(
        rf"(?<![a-z0-9])(?:{vocabulary})(?![a-z0-9])",
        re.IGNORECASE | re.ASCII,
    )
    return ColumnNameRule(regex=regex, risk=risk, label=label)


CONTENT_PATTERNS: tuple[ContentPattern, ...] = (
    ContentPattern(
        name="Email Address",
        description="Standard email address format",
        risk=RiskLevel.HIGH,
        regex=re.compile(
            r"\b[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}\b", re.ASCII
        ),
    ),
    ContentPattern(
        name="SSN (US Social Security Number)",
        description="9-digit US SSN with or without dashes",
        risk=RiskLevel.HIGH,
        regex=re.compile(r"\b\d{3}[-\s]?\d{2}[-\s]?\d{4}\b", re.ASCII),
    ),
    ContentPattern(
        name="Credit / Debit Card Number",
        description="13-19 digit card numbers (Visa, MC, Amex, Discover patterns)",
        risk=RiskLevel.HIGH,
        regex=re.compile(
            r"\b(?:4\d{12}(?:\d{3})?|5[1-5]\d{14}|3[47]\d{13}"
            r"|6(?:011|5\d{2})\d{12}|\d{13,19})\b",
            re.ASCII,
        ),
    ),
    ContentPattern(
        name="US Phone Number",
        description="US phone numbers in common formats",
        risk=RiskLevel.HIGH,
        regex=re.compile(
            r"\b(?:\+1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b", re.ASCII
        ),
    ),
    ContentPattern(
        name="IPv4 Address",
        description="IPv4 addresses (may indicate server logs or tracking data)",
        risk=RiskLevel.MEDIUM,
        regex=re.compile(
            r"\b(?:(?:25[0-5]|2[0-4]\d|[01]?\d\d?)\.){3}"
            r"(?:25[0-5]|2[0-4]\d|[01]?\d\d?)\b",
            re.ASCII,
        ),
    ),
    ContentPattern(
        name="US ZIP Code",
        description="5-digit or ZIP+4 format",
        risk=RiskLevel.LOW,
        regex=re.compile(r"\b\d{5}(?:-\d{4})?\b", re.ASCII),
    ),
    ContentPattern(
        name="Date of Birth Pattern",
        description="Common date formats often used in DOB fields",
        risk=RiskLevel.MEDIUM,
        regex=re.compile(
            r"\b(?:0?[1-9]|1[0-2])[-/](?:0?[1-9]|[12]\d|3[01])[-/](?:19|20)\d{2}\b",
            re.ASCII,
        ),
    ),
    ContentPattern(
        name="Street Address",
        description="Common US street address patterns",
        risk=RiskLevel.MEDIUM,
        regex=re.compile(
            r"\b\d{1,5}\s+[A-Za-z0-9\s]{3,30}"
            r"(?:St|Ave|Blvd|Dr|Rd|Ln|Way|Ct|Pl|Ter)\b\.?",
            re.IGNORECASE | re.ASCII,
        ),
    ),
    ContentPattern(
        name="Passport / ID Number",
        description="Common passport number formats (letter + digits)",
        risk=RiskLevel.HIGH,
        regex=re.compile(r"\b[A-Z]{1,2}\d{6,9}\b", re.ASCII),
    ),
    ContentPattern(
        name="Bank Routing Number (ABA)",
        description="9-digit US bank routing numbers",
        risk=RiskLevel.HIGH,
        regex=re.compile(r"\b\d{9}\b", re.ASCII),
    ),
)

# First matching rule wins, so order matters
COLUMN_NAME_RULES: tuple[ColumnNameRule, ...] = (
    name_rule(r"email|e_mail|email_addr", RiskLevel.HIGH, "Email column"),
    name_rule(r"ssn|social_security|social.security", RiskLevel.HIGH, "SSN column"),
    name_rule(
        r"phone|mobile|cell|telephone|tel", RiskLevel.HIGH, "Phone column"
    ),
    name_rule(
        r"dob|date_of_birth|birth_date|birthdate",
        RiskLevel.HIGH,
        "Date of birth column",
    ),
    name_rule(
        r"first.?name|last.?name|full.?name|fname|lname",
        RiskLevel.HIGH,
        "Name column",
    ),
    name_rule(
        r"address|street|city|zip|postal", RiskLevel.MEDIUM, "Address column"
    ),
    name_rule(
        r"ip.?addr|ip_address|ipv4|ipv6", RiskLevel.MEDIUM, "IP address column"
    ),
    name_rule(
        r"passport|license|driver.?lic|dl_number",
        RiskLevel.HIGH,
        "ID document column",
    ),
    name_rule(
        r"credit.?card|card.?num|cc_num|cvv|expiry",
        RiskLevel.HIGH,
        "Payment card column",
    ),
    name_rule(
        r"account.?num|bank.?account|routing",
        RiskLevel.HIGH,
        "Bank account column",
    ),
    name_rule(
        r"gender|sex|race|ethnicity|religion|nationality",
        RiskLevel.MEDIUM,
        "Sensitive demographic column",
    ),
    name_rule(
        r"salary|income|wage|compensation", RiskLevel.MEDIUM, "Financial column"
    ),
    name_rule(
        r"diagnosis|condition|medication|health|medical|patient",
        RiskLevel.HIGH,
        "Health data column",
    ),
)
