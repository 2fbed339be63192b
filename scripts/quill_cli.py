#!/usr/bin/env python3
"""
Command-line interface for QUILL resumes.

Subcommands:
- templates: List the available layouts
- render: Render a resume YAML to a printable HTML page
- export: Export a resume YAML to LaTeX (resume.tex)
- compile: Export and compile a resume to PDF
- polish: Polish one text field with the writing assistant
- example: Write the example (or an empty) resume as YAML
"""

from pathlib import Path

import typer
from dotenv import load_dotenv

from quill.contexts.assistant import WritingAssistant, apply_polish
from quill.contexts.authoring import (
    FieldAddress,
    empty_resume,
    example_resume,
    load_resume,
    save_resume,
)
from quill.contexts.rendering import (
    TemplateId,
    compile_resume,
    list_templates,
    preview,
    printable_page,
    render,
    to_html,
)
from quill.contexts.templating import TemplateRenderError, export_document, export_resume

load_dotenv()

app = typer.Typer(
    add_completion=False,
    help="Render, export and compile resumes",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _fail(message: str) -> None:
    typer.secho(f"\n✗ Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _load(resume_file: Path):
    try:
        return load_resume(resume_file)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))


@app.command("templates")
def templates_command():
    """
    List the available templates.

    Example:\n

        $ quill_cli.py templates
    """
    typer.secho("\nTemplates:", fg=typer.colors.BLUE, bold=True)
    for info in list_templates():
        typer.echo(f"  • {info.id.value:<10} {info.name}: {info.description}")


@app.command("render")
def render_command(
    resume_file: Path = typer.Argument(..., help="Resume .yaml file", exists=True, dir_okay=False),
    template: str = typer.Option(
        TemplateId.CLASSIC.value, "--template", "-t", help="Template id (see 'templates')"
    ),
    output: Path = typer.Option(None, "--output", "-o", help="Output .html path"),
    scale: float = typer.Option(
        None, "--scale", "-s", help="Write a scaled preview fragment instead of a printable page"
    ),
):
    """
    Render a resume with one of the templates to HTML.

    Examples:\n

        $ quill_cli.py render resume.yaml -t modern                # Printable page

        $ quill_cli.py render resume.yaml -t tech -s 0.8 -o p.html # Preview fragment
    """
    data = _load(resume_file)
    output_path = output or resume_file.with_suffix(".html")

    try:
        if scale is None:
            html = printable_page(data, template)
        else:
            html = str(to_html(preview(render(data, template), scale)))
    except ValueError as e:
        _fail(str(e))

    output_path.write_text(html, encoding="utf-8")
    typer.secho(f"\n✓ Rendered '{template}' to: {output_path}", fg=typer.colors.GREEN)


@app.command("export")
def export_command(
    resume_file: Path = typer.Argument(..., help="Resume .yaml file", exists=True, dir_okay=False),
    output_dir: Path = typer.Option(
        None, "--output-dir", "-o", help="Directory for resume.tex (default: next to the YAML)"
    ),
    stdout: bool = typer.Option(False, "--stdout", help="Print LaTeX instead of writing a file"),
):
    """
    Export a resume to LaTeX.

    Examples:\n

        $ quill_cli.py export resume.yaml

        $ quill_cli.py export resume.yaml --stdout > resume.tex
    """
    data = _load(resume_file)

    try:
        if stdout:
            typer.echo(export_document(data), nl=False)
            return
        output_path = export_resume(data, output_dir or resume_file.parent)
    except TemplateRenderError as e:
        _fail(str(e))

    typer.secho(f"\n✓ Exported LaTeX to: {output_path}", fg=typer.colors.GREEN)


@app.command("compile")
def compile_command(
    resume_file: Path = typer.Argument(..., help="Resume .yaml file", exists=True, dir_okay=False),
    output_dir: Path = typer.Option(
        None, "--output-dir", "-o", help="Directory for resume.tex and resume.pdf"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed compiler output"),
):
    """
    Export a resume to LaTeX and compile it to PDF.

    Example:\n

        $ quill_cli.py compile resume.yaml -o build/
    """
    data = _load(resume_file)

    typer.secho(f"\nCompiling: {resume_file.name}", fg=typer.colors.BLUE, bold=True)
    result = compile_resume(data, output_dir, verbose=verbose)

    if not result.success:
        for err in result.errors[:5]:
            typer.secho(f"  {err}", fg=typer.colors.RED, err=True)
        _fail("Compilation failed")

    typer.secho(
        f"\n✓ PDF ({result.page_count} pages): {result.pdf_path}", fg=typer.colors.GREEN
    )
    if result.warnings:
        typer.secho(f"  {len(result.warnings)} warnings", fg=typer.colors.YELLOW)


@app.command("polish")
def polish_command(
    resume_file: Path = typer.Argument(..., help="Resume .yaml file", exists=True, dir_okay=False),
    section: str = typer.Option("profile", "--section", help="profile, experience, education, ..."),
    field: str = typer.Option("summary", "--field", help="Text field to polish"),
    entry_id: str = typer.Option(None, "--id", help="Entry id (required for list sections)"),
    output: Path = typer.Option(
        None, "--output", "-o", help="Output path (if not specified, modifies in-place)"
    ),
):
    """
    Polish one text field with the writing assistant.

    The field is left unchanged when the assistant is disabled or unavailable.

    Examples:\n

        $ quill_cli.py polish resume.yaml                                   # Profile summary

        $ quill_cli.py polish resume.yaml --section experience --id 1 --field description
    """
    data = _load(resume_file)
    assistant = WritingAssistant.from_settings()
    if not assistant.available:
        typer.secho(
            "Writing assistant unavailable (set QUILL_AI_ENABLED and an API key)",
            fg=typer.colors.YELLOW,
            err=True,
        )

    try:
        updated = apply_polish(data, FieldAddress(section, field, entry_id), assistant)
    except ValueError as e:
        _fail(str(e))

    if updated is data:
        typer.echo("No change.")
        return

    output_path = save_resume(updated, output or resume_file)
    typer.secho(f"\n✓ Polished {section}.{field} saved to: {output_path}", fg=typer.colors.GREEN)


@app.command("example")
def example_command(
    output: Path = typer.Argument(Path("resume.yaml"), help="Where to write the YAML"),
    empty: bool = typer.Option(False, "--empty", help="Write a blank resume instead"),
):
    """
    Write the example resume (or a blank one) as YAML to start editing from.

    Example:\n

        $ quill_cli.py example my_resume.yaml
    """
    data = empty_resume() if empty else example_resume()
    output_path = save_resume(data, output)
    typer.secho(f"\n✓ Wrote {'blank' if empty else 'example'} resume to: {output_path}",
                fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
