"""
LaTeX Compilation Module

Compiles exported .tex files to PDF with the configured LaTeX compiler.
The export itself never depends on this module; compilation is an optional
host step after write_export().
"""

import re
import shutil
import subprocess
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from omegaconf import DictConfig

from quill.contexts.authoring.resume_data_structure import ResumeData
from quill.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    log_compilation_result,
    log_compilation_start,
    setup_rendering_logger,
)
from quill.contexts.templating.latex_generator import write_export
from quill.utils.config import load_settings
from quill.utils.pdf_processing import page_count
from quill.utils.timestamp import now

# Intermediate files written next to the .tex file
LATEX_ARTIFACTS = [".aux", ".log", ".out", ".toc"]

# "-file-line-error" style: "./resume.tex:42: Undefined control sequence."
_FILE_LINE_ERROR = re.compile(r"^[^\s:]*\.tex:(\d+): (.+)$", re.MULTILINE)
_BANG_ERROR = re.compile(r"^! (.+)$", re.MULTILINE)
_FATAL_MESSAGES = ("Emergency stop", "File ended while scanning use of")
_WARNING = re.compile(
    r"^(?:LaTeX|Package \w+) Warning: (.+)$|^((?:Overfull|Underfull) \\[hv]box .+)$",
    re.MULTILINE,
)


@dataclass
class CompilationResult:
    """
    Outcome of one compile_latex() call.

    Attributes:
        success: True when a PDF was produced without LaTeX errors
        pdf_path: Generated PDF, None on failure
        stdout: Compiler stdout, all passes joined
        stderr: Compiler stderr, all passes joined
        errors: Parsed LaTeX errors ("line N: message" where the line is known)
        warnings: Parsed LaTeX warnings
        page_count: Pages in the PDF, None when there is no readable PDF
    """

    success: bool
    pdf_path: Optional[Path] = None
    stdout: str = ""
    stderr: str = ""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    page_count: Optional[int] = None


def _parse_latex_log(log_content: str) -> Tuple[List[str], List[str]]:
    """
    Extract errors and warnings from a LaTeX .log file.

    Returns:
        Tuple of (errors, warnings)
    """
    errors = [
        f"line {match.group(1)}: {match.group(2).strip()}"
        for match in _FILE_LINE_ERROR.finditer(log_content)
    ]

    # "!" errors repeat the file-line errors; keep only the ones not seen yet
    for match in _BANG_ERROR.finditer(log_content):
        message = match.group(1).strip()
        if not any(error.endswith(message) for error in errors):
            errors.append(message)

    for message in _FATAL_MESSAGES:
        if message in log_content and not any(message in error for error in errors):
            errors.append(message)

    warnings = [
        (match.group(1) or match.group(2)).strip() for match in _WARNING.finditer(log_content)
    ]
    return errors, warnings


def _remove_artifacts(tex_path: Path) -> None:
    """Delete the intermediate files belonging to tex_path."""
    for ext in LATEX_ARTIFACTS:
        tex_path.with_suffix(ext).unlink(missing_ok=True)


def _stage(tex_file: Path, compile_dir: Path) -> Path:
    """
    Place tex_file in compile_dir and clear outputs of earlier runs there.

    A stale PDF would otherwise be mistaken for a fresh one.
    """
    compile_dir.mkdir(parents=True, exist_ok=True)
    staged = compile_dir / tex_file.name
    if staged != tex_file:
        shutil.copy2(tex_file, staged)

    for ext in [".pdf"] + LATEX_ARTIFACTS:
        staged.with_suffix(ext).unlink(missing_ok=True)
    return staged


def _run_passes(compiler: str, tex_file: Path, num_passes: int) -> Tuple[bool, str, str]:
    """
    Run the compiler num_passes times in the file's directory.

    The second pass resolves references the first wrote to .aux. Stops at
    the first pass with a non-zero exit code.

    Returns:
        Tuple of (all passes exited 0, joined stdout, joined stderr)
    """
    stdout, stderr = [], []
    for _ in range(num_passes):
        completed = subprocess.run(
            [compiler, "-interaction=nonstopmode", "-file-line-error", tex_file.name],
            cwd=tex_file.parent,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        stdout.append(completed.stdout)
        stderr.append(completed.stderr)
        if completed.returncode != 0:
            return False, "\n".join(stdout), "\n".join(stderr)
    return True, "\n".join(stdout), "\n".join(stderr)


def compiler_available(compiler: Optional[str] = None) -> bool:
    """True if the LaTeX compiler (default: from settings) is on PATH."""
    compiler = compiler or load_settings().latex.compiler
    return shutil.which(compiler) is not None


def compile_latex(
    tex_file: Path,
    compile_dir: Optional[Path] = None,
    num_passes: Optional[int] = None,
    keep_artifacts: Optional[bool] = None,
    settings: Optional[DictConfig] = None,
) -> CompilationResult:
    """
    Compile a LaTeX file to PDF.

    Problems (missing file, missing compiler, LaTeX errors) are reported in
    the result, never raised. Intermediate files are kept after a failure.

    Args:
        tex_file: .tex file to compile
        compile_dir: Output directory (default: the .tex file's directory)
        num_passes: Compiler passes (default: latex.num_passes)
        keep_artifacts: Keep .aux/.log/.out/.toc (default: latex.keep_artifacts)
        settings: Settings to use (default: load_settings())

    Returns:
        CompilationResult
    """
    settings = settings or load_settings()
    compiler = settings.latex.compiler
    num_passes = settings.latex.num_passes if num_passes is None else num_passes
    keep_artifacts = settings.latex.keep_artifacts if keep_artifacts is None else keep_artifacts

    source = Path(tex_file).resolve()
    if not source.exists():
        return CompilationResult(success=False, errors=[f"TeX file not found: {source}"])
    if shutil.which(compiler) is None:
        return CompilationResult(success=False, errors=[f"LaTeX compiler not found: {compiler}"])

    compile_dir = Path(compile_dir).resolve() if compile_dir is not None else source.parent
    staged = _stage(source, compile_dir)
    log_compilation_start(staged, num_passes, compile_dir)

    exited_cleanly, stdout, stderr = _run_passes(compiler, staged, num_passes)

    log_file = staged.with_suffix(".log")
    errors, warnings = [], []
    if log_file.exists():
        # LaTeX logs are not guaranteed to be valid UTF-8
        errors, warnings = _parse_latex_log(log_file.read_text(encoding="latin-1"))

    pdf_path = staged.with_suffix(".pdf")
    if not pdf_path.exists():
        errors = errors or ["PDF file was not generated"]
    # A PDF without parsed errors counts even when the exit code was non-zero (warnings)
    success = pdf_path.exists() and not errors
    if not exited_cleanly and success:
        _log_debug("Compiler exited non-zero but produced a PDF without errors")

    if success and not keep_artifacts:
        _remove_artifacts(staged)
    if staged != source:
        staged.unlink(missing_ok=True)

    return CompilationResult(
        success=success,
        pdf_path=pdf_path if pdf_path.exists() else None,
        stdout=stdout,
        stderr=stderr,
        errors=errors,
        warnings=warnings,
        page_count=page_count(pdf_path) if pdf_path.exists() else None,
    )


def compile_resume(
    data: ResumeData,
    output_dir: Optional[Path] = None,
    verbose: bool = False,
    settings: Optional[DictConfig] = None,
) -> CompilationResult:
    """
    Export a resume to LaTeX and compile it to PDF in one session.

    Creates a timestamped log directory under logs_path, writes resume.tex
    there (or to output_dir) and compiles it in place.

    Args:
        data: Resume to export and compile
        output_dir: Directory for resume.tex and resume.pdf (default: the log directory)
        verbose: Show detailed warnings/errors in logs (default: False)
        settings: Settings to use (default: load_settings())

    Returns:
        CompilationResult with success status and diagnostic information
    """
    settings = settings or load_settings()

    log_dir = Path(settings.logs_path) / f"render_{now()}"
    log_dir.mkdir(parents=True, exist_ok=True)
    setup_rendering_logger(log_dir, settings.latex.compiler)

    output_dir = Path(output_dir).resolve() if output_dir is not None else log_dir
    tex_file = write_export(data, output_dir, settings.export.filename)
    _log_info(f"Exported {tex_file.name} to {output_dir}")

    start_time = time.time()
    result = compile_latex(tex_file, settings=settings)
    log_compilation_result(tex_file.stem, result, time.time() - start_time, verbose=verbose)

    if not result.success:
        _log_debug(f"Artifacts kept in {output_dir}: compilation failed")
    return result
