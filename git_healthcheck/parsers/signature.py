"""Signature verification output classification.

The text classified here is what `git log --show-signature` prints above a
commit, produced by gpg, gpgsm or ssh-keygen. Patterns are tried in the
order below; the first match decides the state.

    =========  ===================================================
    state      pattern
    =========  ===================================================
    BAD        ``BAD signature``, ``Could not verify signature``
    EXPIRED    ``expired key``, ``EXPKEYSIG``, ``key has expired``,
               ``expired signature``
    GOOD       ``Good signature``, ``Good "<namespace>" signature``
    UNCLEAR    any signature marker (``gpg:``, ``gpgsm:``,
               ``Signature made``, ``signature``) with none of the above
    ABSENT     no signature marker at all
    =========  ===================================================

Expired keys are tested before good signatures because gpg reports a
signature made with an expired key as "Good signature" followed by an
expiry note.
"""

import re
from typing import List, Optional, Tuple

from git_healthcheck.models.signature import SignatureState, SignatureStatus


SIGNATURE_PATTERNS: Tuple[Tuple[SignatureState, "re.Pattern[str]"], ...] = (
    (SignatureState.BAD, re.compile(r"BAD signature|Could not verify signature", re.IGNORECASE)),
    (SignatureState.EXPIRED, re.compile(
        r"expired key|EXPKEYSIG|key has expired|expired signature", re.IGNORECASE)),
    (SignatureState.GOOD, re.compile(r'Good (?:"[^"]*" )?signature', re.IGNORECASE)),
)

SIGNATURE_MARKER = re.compile(r"^(?:gpg|gpgsm):|Signature made|signature", re.IGNORECASE | re.MULTILINE)

_KEY_PATTERNS = (
    re.compile(r"using \w+ key (\S+)"),
    re.compile(r"with \S+ key (\S+)"),
    re.compile(r"key ID (\S+)"),
)

_SIGNER = re.compile(r'Good (?:"[^"]*" )?signature (?:from|for) "?([^"\n]+?)"?(?:\s+\[\w+\])?(?: with .*)?$',
                     re.IGNORECASE | re.MULTILINE)


def extract_key_info(text: str) -> Optional[str]:
    """
    Pull the signer and key identifier out of verification output.

    Returns:
        "signer (key)", just the key, just the signer, or None
    """
    key = None
    for pattern in _KEY_PATTERNS:
        match = pattern.search(text)
        if match:
            key = match.group(1)
            break

    signer_match = _SIGNER.search(text)
    signer = signer_match.group(1).strip() if signer_match else None

    if signer and key:
        return f"{signer} ({key})"
    return signer or key


def _evidence(text: str) -> List[str]:
    return [line.rstrip() for line in text.splitlines() if line.strip()]


def classify_signature(text: Optional[str], has_commits: bool = True) -> SignatureStatus:
    """
    Classify the verification output of the latest commit.

    Args:
        text: Verification output with the commit line removed, or None when
            it could not be obtained
        has_commits: False when the repository has no commits yet

    Returns:
        SignatureStatus with the state, key information and evidence lines
    """
    if not has_commits:
        return SignatureStatus(SignatureState.NO_HISTORY)
    if text is None:
        return SignatureStatus(SignatureState.UNKNOWN)

    evidence = _evidence(text)
    for state, pattern in SIGNATURE_PATTERNS:
        if pattern.search(text):
            key_info = extract_key_info(text)
            return SignatureStatus(state, key_info=key_info, evidence=evidence)

    if SIGNATURE_MARKER.search(text):
        return SignatureStatus(SignatureState.UNCLEAR, key_info=extract_key_info(text), evidence=evidence)

    return SignatureStatus(SignatureState.ABSENT)
