"""The TFI to JavaScript compiler."""

from .compiler import CompilationPipeline, compile_tfi, compile_with_details, compile_with_options, get_compilation_stats
from .config.config import VERSION as __version__
from .data_structures import CompilationOptions, CompilationResult, CompilationStats
from .exceptions import CompilationError, ErrorCode, GenerationError, ParseError, TFIError, ValidationError
