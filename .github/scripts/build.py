"""
Build script for the marimo apps.

Each app under apps/ gets the modules it imports from modules/ inlined into
the importing cell, then is exported to HTML/WebAssembly in run mode. An
index.html linking every exported app is rendered from a Jinja2 template.

The script can be run from the repository root:
    uv run .github/scripts/build.py [--output-dir OUTPUT_DIR] [--template TEMPLATE]

The exported files are placed in the output directory (default: _site).
"""

# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "jinja2==3.1.6",
#     "fire==0.7.0",
#     "loguru==0.7.3"
# ]
# ///

import re
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

import fire
import jinja2
from loguru import logger

# `from modules.x.y import z` (single line or parenthesised), with its indent
_FROM_IMPORT = re.compile(
    r"^([ \t]*)from\s+(modules(?:\.\w+)+)\s+import\s+(?:\([^)]*\)|[^\n(]+)\n",
    re.MULTILINE,
)
# `import modules.x.y`
_PLAIN_IMPORT = re.compile(r"^([ \t]*)import\s+(modules(?:\.\w+)+)[ \t]*\n", re.MULTILINE)
# `from .x import`, `from ..x import`, `from . import`
_RELATIVE_IMPORT = re.compile(r"from\s+(\.+)([\w.]*)\s+import")


def resolve_relative(module_name: str, dots: str, target: str) -> Optional[str]:
    """Absolute name for a relative import found in module_name.

    One dot is the module's own package, each extra dot goes one level up.
    Returns None when the import climbs above the top-level package.
    """
    parts = module_name.split(".")
    levels_up = len(dots)
    if levels_up > len(parts) - 1:
        return None
    base = parts[:-levels_up]
    return ".".join(base + [target]) if target else ".".join(base)


def absolutize_imports(code: str, module_name: str) -> str:
    """Rewrite relative imports in a module's source as absolute ones."""

    def _replace(match: re.Match) -> str:
        absolute = resolve_relative(module_name, match.group(1), match.group(2))
        if absolute is None:
            return match.group(0)
        return f"from {absolute} import"

    return _RELATIVE_IMPORT.sub(_replace, code)


def imported_modules(code: str) -> Set[str]:
    """Names of all `modules.*` modules imported by code (absolute imports only)."""
    found = {m.group(2) for m in _FROM_IMPORT.finditer(code)}
    found.update(m.group(2) for m in _PLAIN_IMPORT.finditer(code))
    return found


def module_file(root: Path, module_name: str) -> Path:
    """Source file of a dotted module name under root."""
    return root / f"{module_name.replace('.', '/')}.py"


def collect_modules(app_code: str, root: Path) -> Dict[str, str]:
    """Source of every module the app needs, including transitive imports.

    Returns a mapping of module name to its source with relative imports
    already made absolute. Modules without a source file are skipped.
    """
    sources: Dict[str, str] = {}
    pending = sorted(imported_modules(app_code))
    seen: Set[str] = set()

    while pending:
        name = pending.pop()
        if name in seen:
            continue
        seen.add(name)

        path = module_file(root, name)
        if not path.exists():
            logger.warning(f"Module file not found: {path}")
            continue

        code = absolutize_imports(path.read_text(encoding="utf-8"), name)
        sources[name] = code
        pending.extend(sorted(imported_modules(code) - seen))

    return sources


def dependency_order(name: str, sources: Dict[str, str], done: Set[str]) -> List[str]:
    """Modules to emit for name, dependencies first, skipping those in done.

    done is updated in place. Cycles are broken at the first revisit.
    """
    order: List[str] = []

    def _visit(current: str) -> None:
        if current in done or current not in sources:
            return
        done.add(current)
        for dep in sorted(imported_modules(sources[current])):
            _visit(dep)
        order.append(current)

    _visit(name)
    return order


def strip_module_imports(code: str) -> str:
    """Remove `modules.*` import statements from code."""
    code = _FROM_IMPORT.sub("", code)
    return _PLAIN_IMPORT.sub("", code)


def _indent_block(name: str, code: str, indent: str) -> str:
    lines = [f"{indent}# --- inlined from {name} ---"]
    lines.extend(f"{indent}{line}" if line.strip() else "" for line in code.split("\n"))
    lines.append("")
    return "\n".join(lines) + "\n"


def inline_modules(app_path: Path, output_path: Path, root: Path) -> int:
    """Write app_path to output_path with its `modules.*` imports inlined.

    Each import statement is replaced by the code of the imported module,
    preceded by any of its dependencies not inlined yet. Returns the number
    of modules inlined.
    """
    app_code = app_path.read_text(encoding="utf-8")
    sources = collect_modules(app_code, root)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if not sources:
        logger.info(f"No modules to inline for {app_path.name}")
        output_path.write_text(app_code, encoding="utf-8")
        return 0

    logger.info(f"Inlining {len(sources)} modules for {app_path.name}: {sorted(sources)}")
    done: Set[str] = set()

    def _replace(match: re.Match) -> str:
        indent, name = match.group(1), match.group(2)
        return "".join(
            _indent_block(dep, strip_module_imports(sources[dep]), indent)
            for dep in dependency_order(name, sources, done)
        )

    inlined = _FROM_IMPORT.sub(_replace, app_code)
    inlined = _PLAIN_IMPORT.sub(_replace, inlined)
    output_path.write_text(inlined, encoding="utf-8")

    logger.info(f"Successfully inlined modules into {output_path}")
    return len(done)


def export_app(app_path: Path, output_dir: Path, root: Path) -> bool:
    """Inline and export one app to HTML/WebAssembly in run mode.

    Returns True if the export succeeded.
    """
    inlined_path = output_dir / app_path
    inline_modules(app_path, inlined_path, root)

    output_file = output_dir / app_path.with_suffix(".html")
    output_file.parent.mkdir(parents=True, exist_ok=True)

    cmd: List[str] = [
        "uvx",
        "marimo",
        "export",
        "html-wasm",
        "--sandbox",
        "--mode",
        "run",
        "--no-show-code",
        str(inlined_path),
        "-o",
        str(output_file),
    ]
    logger.info(f"Exporting {app_path} to {output_file}")
    logger.debug(f"Running command: {cmd}")

    try:
        subprocess.run(cmd, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as e:
        logger.error(f"Error exporting {app_path}:")
        logger.error(f"Command output: {e.stderr}")
        return False
    except OSError as e:
        logger.error(f"Could not run {cmd[0]} for {app_path}: {e}")
        return False

    logger.info(f"Successfully exported {app_path}")
    return True


def export_folder(folder: Path, output_dir: Path, root: Path) -> List[dict]:
    """Export every app in folder; returns template data for the exported ones."""
    if not folder.exists():
        logger.warning(f"Directory not found: {folder}")
        return []

    apps = sorted(
        p for p in folder.rglob("*.py") if "public" not in p.relative_to(folder).parts
    )
    logger.debug(f"Found {len(apps)} Python files in {folder}")
    if not apps:
        logger.warning(f"No apps found in {folder}!")
        return []

    exported = [
        {
            "display_name": app.stem.replace("_", " ").title(),
            "html_path": app.with_suffix(".html").as_posix(),
        }
        for app in apps
        if export_app(app, output_dir, root)
    ]
    logger.info(f"Successfully exported {len(exported)} out of {len(apps)} apps")
    return exported


def render_index(output_dir: Path, template_file: Path, apps: List[dict]) -> Optional[Path]:
    """Render index.html listing the exported apps; None if rendering failed."""
    index_path = output_dir / "index.html"
    output_dir.mkdir(parents=True, exist_ok=True)

    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(template_file.parent),
        autoescape=jinja2.select_autoescape(["html", "xml", "html.j2"]),
    )
    try:
        rendered = env.get_template(template_file.name).render(apps=apps)
        index_path.write_text(rendered, encoding="utf-8")
    except jinja2.exceptions.TemplateError as e:
        logger.error(f"Error rendering template: {e}")
        return None
    except OSError as e:
        logger.error(f"Error generating index.html: {e}")
        return None

    logger.info(f"Successfully generated index.html at {index_path}")
    return index_path


def main(
    output_dir: Union[str, Path] = "_site",
    template: Union[str, Path] = "templates/index.html.j2",
    apps_dir: Union[str, Path] = "apps",
    modules_root: Union[str, Path] = ".",
) -> None:
    """Export all apps and generate the index page.

    Args:
        output_dir: Directory for the exported site
        template: Jinja2 template for index.html
        apps_dir: Directory holding the marimo apps
        modules_root: Directory containing the `modules` package
    """
    logger.info("Starting marimo build process")
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info(f"Output directory: {output_dir}")

    apps = export_folder(Path(apps_dir), output_dir, Path(modules_root))
    if not apps:
        logger.warning("No apps exported!")
        return

    render_index(output_dir, Path(template), apps)
    logger.info(f"Build completed successfully. Output directory: {output_dir}")


if __name__ == "__main__":
    fire.Fire(main)
