"""
Diagnostic/warning system for the transpiler.

Collects and reports warnings about Flow constructs that were rendered
incompletely or dropped during declaration generation. Helps developers
see which parts of a declaration file are known gaps.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for transpiler diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    file_path: str = ''
    line: Optional[int] = None
    construct: str = ''  # e.g., 'import namespace', 'declare class'

    def __str__(self) -> str:
        location = self.file_path
        if self.line:
            location = f'{location}:{self.line}'
        if location:
            return f'[{self.severity.value}] {location}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class TranspilerDiagnostics:
    """
    Collects transpiler warnings/diagnostics during declaration generation.

    Usage:
        diag = TranspilerDiagnostics()
        diag.warn_declare_class_stubbed("Foo", "index.js", line=42)
        # ... after transpilation ...
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    # =========================================================================
    # SPECIFIC WARNING METHODS
    # =========================================================================

    def warn_namespace_import_dropped(
        self,
        local_name: str,
        file_path: str = '',
        line: Optional[int] = None,
    ) -> None:
        """Warn that `* as name` was rendered as an empty specifier."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'Namespace import "* as {local_name}" was rendered as an empty specifier.',
            file_path=file_path,
            line=line,
            construct='import namespace',
        ))

    def warn_export_specifier_dropped(
        self,
        kind: str,
        exported_name: str,
        file_path: str = '',
        line: Optional[int] = None,
    ) -> None:
        """Warn that a default/namespace export specifier was rendered empty."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W002',
            message=f'{kind} export specifier "{exported_name}" was rendered as an empty specifier.',
            file_path=file_path,
            line=line,
            construct='export specifier',
        ))

    def warn_declare_class_stubbed(
        self,
        class_name: str,
        file_path: str = '',
        line: Optional[int] = None,
    ) -> None:
        """Warn that a `declare class` body was replaced by a stub."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W003',
            message=f'declare class "{class_name}" is not supported; emitted a stub.',
            file_path=file_path,
            line=line,
            construct='declare class',
        ))

    def info_implementation_dropped(
        self,
        kind: str,
        name: str = '',
        file_path: str = '',
        line: Optional[int] = None,
    ) -> None:
        """Info that an unexported implementation statement was left out."""
        label = f'{kind} "{name}"' if name else kind
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message=f'Unexported {label} has no declaration output.',
            file_path=file_path,
            line=line,
            construct='implementation',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def _warnings_by_construct(self) -> Dict[str, List[Diagnostic]]:
        by_construct: Dict[str, List[Diagnostic]] = {}
        for w in self.warnings:
            by_construct.setdefault(w.construct or 'other', []).append(w)
        return dict(sorted(by_construct.items()))

    def print_summary(self, file=None) -> None:
        """Print diagnostics to stderr (or specified file).

        Without verbose mode only the one-line warning summary is printed,
        and only when there are warnings. Verbose mode lists every warning
        grouped by construct, followed by the info diagnostics.
        """
        if file is None:
            file = sys.stderr

        if not self._verbose:
            if self.warnings:
                print(self.get_summary(), file=file)
            return

        warnings = self.warnings
        infos = [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

        if warnings:
            print(f'\nTranspiler warnings ({len(warnings)}):', file=file)
            for construct, diags in self._warnings_by_construct().items():
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                for d in diags:
                    print(f'    {d}', file=file)

        if infos:
            print(f'\nTranspiler info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """One line counting warnings per construct."""
        if not self.warnings:
            return 'No transpiler warnings.'
        parts = [f'{len(diags)} {construct}' for construct, diags in self._warnings_by_construct().items()]
        return f'Transpiler warnings: {", ".join(parts)}'
