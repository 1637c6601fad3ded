"""
Psychometric inventories administered to language models.

Items are sampled repeatedly through a model client, parsed into numbers and
scored as Big Five (IPIP-NEO-120), MBTI and DISC profiles.
"""

from app.services.psychometrics.items import VALID_INVENTORIES, items_for_inventories
from app.services.psychometrics.parser import parse_response
from app.services.psychometrics.profile import assemble_profile, score_inventories
from app.services.psychometrics.sampling import SamplingOrchestrator

__all__ = [
    "VALID_INVENTORIES",
    "SamplingOrchestrator",
    "assemble_profile",
    "items_for_inventories",
    "parse_response",
    "score_inventories",
]
