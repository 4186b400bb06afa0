"""Email domain to university matching - pure functions over in-memory records."""
from collections.abc import Sequence

from app.models.university import University

# Leading labels institutions commonly put in front of their main domain
COMMON_PREFIXES = frozenset({
    "student", "students",
    "postgrad", "postgraduate", "pg", "grad", "graduate", "research",
    "undergrad", "undergraduate", "ug",
    "phd", "doctoral", "doctorate",
    "mail", "email", "mx", "smtp", "imap", "webmail",
    "my", "portal", "campus", "uni", "alumni",
})

MAX_STRIPPED_LABELS = 3


def extract_domain(email: str | None) -> str | None:
    """Part between the first and second '@', lowercased. None when missing or empty."""
    if not email or "@" not in email:
        return None
    domain = email.split("@")[1].strip().lower()
    return domain or None


def index_by_domain(records: Sequence[University]) -> dict[str, University]:
    """Lowercase domain -> record, first record wins."""
    index: dict[str, University] = {}
    for record in records:
        index.setdefault(record.domain.lower(), record)
    return index


def exact_match(domain: str, index: dict[str, University]) -> University | None:
    return index.get(domain)


def suffix_match(domain: str, records: Sequence[University]) -> University | None:
    """Longest record domain equal to, or a dot-suffix of, `domain`.

    Equal lengths keep the earlier record.
    """
    best, best_len = None, -1
    for record in records:
        d = record.domain.lower()
        if (domain == d or domain.endswith(f".{d}")) and len(d) > best_len:
            best, best_len = record, len(d)
    return best


def strip_prefix_match(domain: str, index: dict[str, University]) -> University | None:
    """Drop up to three leading labels and retry the exact lookup.

    A single label is only dropped when it is a known prefix; two or three
    labels are dropped unconditionally.
    """
    labels = domain.split(".")
    for remove_count in range(1, min(MAX_STRIPPED_LABELS, len(labels) - 2) + 1):
        if remove_count == 1 and labels[0] not in COMMON_PREFIXES:
            continue
        hit = index.get(".".join(labels[remove_count:]))
        if hit is not None:
            return hit
    return None


def fuzzy_match(domain: str, records: Sequence[University]) -> University | None:
    """First record whose domain contains, or is contained in, `domain` on a dot boundary."""
    for record in records:
        d = record.domain.lower()
        if f".{d}" in domain or f".{domain}" in d:
            return record
    return None


def match_with_rule(email: str | None, records: Sequence[University]) -> tuple[University | None, str | None]:
    """Best university for an email plus the name of the rule that found it."""
    domain = extract_domain(email)
    if domain is None:
        return None, None

    index = index_by_domain(records)

    hit = exact_match(domain, index)
    if hit is not None:
        return hit, "exact"

    hit = suffix_match(domain, records)
    if hit is not None:
        return hit, "suffix"

    hit = strip_prefix_match(domain, index)
    if hit is not None:
        return hit, "prefix"

    hit = fuzzy_match(domain, records)
    if hit is not None:
        return hit, "fuzzy"

    return None, None


def match_university(email: str | None, records: Sequence[University]) -> University | None:
    """Best university for an email, or None."""
    university, _ = match_with_rule(email, records)
    return university
