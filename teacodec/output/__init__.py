"""
TeaCodec Output Module
=======================

Console display and report generation for codec results.
"""

from teacodec.output.console import CodecConsoleOutput
from teacodec.output.report import CodecReportGenerator

__all__ = [
    "CodecConsoleOutput",
    "CodecReportGenerator",
]
