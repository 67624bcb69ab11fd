__all__ = ['generate', 'GeneratorConfig', 'GenerationResult', 'OutputError', 'Diagnostic',
           'AssetRecord', 'Registry', 'walk', 'WalkEntry', 'WalkError']

from .config import GeneratorConfig
from .diagnostics import Diagnostic
from .generator import GenerationResult, OutputError, generate
from .registry import AssetRecord, Registry
from .walker import WalkEntry, WalkError, walk
