#!/usr/bin/env python3
"""Generate API reference pages for kombi."""

import ast
from pathlib import Path

import mkdocs_gen_files

root = Path(__file__).parent.parent.parent
src = root / 'src' / 'kombi'
package = 'kombi'


def get_module_description(module_path: Path) -> str:
    """Return the first line of a module docstring, or an empty string."""
    try:
        tree = ast.parse(module_path.read_text(encoding='utf-8'))
    except (OSError, SyntaxError):
        return ''
    doc = ast.get_docstring(tree) or ''
    return doc.splitlines()[0] if doc else ''


public_modules = []
for path in sorted(src.rglob('*.py')):
    rel_parts = path.relative_to(src).with_suffix('').parts
    # Skip private modules (any component starting with a single underscore)
    if any(part.startswith('_') and not part.startswith('__') for part in rel_parts):
        continue

    parts = tuple(rel_parts)
    doc_path = path.relative_to(src).with_suffix('.md')
    if parts[-1] == '__init__':
        parts = parts[:-1]
        doc_path = doc_path.with_name('index.md')

    full_doc_path = Path('reference', package, doc_path)
    ident = '.'.join((package, *parts))
    if parts:
        public_modules.append((ident, doc_path.as_posix(), get_module_description(path)))

    with mkdocs_gen_files.open(full_doc_path, 'w') as fd:
        fd.write(f'# `{ident}`\n\n')
        fd.write(f'::: {ident}\n')
        fd.write('    options:\n')
        fd.write('      members: true\n')
        fd.write('      show_source: true\n\n')

    mkdocs_gen_files.set_edit_path(full_doc_path, path)

with mkdocs_gen_files.open('reference/index.md', 'w') as index:
    index.write('# API Reference\n\n')
    index.write('| Module | Description |\n')
    index.write('|--------|-------------|\n')
    for ident, doc_path, description in public_modules:
        index.write(f'| [{ident}]({package}/{doc_path}) | {description} |\n')
