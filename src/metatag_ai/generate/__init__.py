"""Meta description generation entry point.

Public API:
- MetaDescriptionGenerator
- GenerateRequestHandler
- GenerationResult (Success | Failure)
- post_process
- build_prompts
"""

from .generator import MetaDescriptionGenerator
from .handler import GenerateRequestHandler
from .postprocess import post_process
from .prompts import Prompts, build_prompts
from .result import Failure, GenerationResult, Success

__all__ = [
    "Failure",
    "GenerateRequestHandler",
    "GenerationResult",
    "MetaDescriptionGenerator",
    "Prompts",
    "Success",
    "build_prompts",
    "post_process",
]
