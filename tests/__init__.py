"""
Only the root tests/ directory carries an __init__.py; subdirectories rely on PEP 420
namespace packages.

Keeping this one file makes pytest treat tests/ as a package, which keeps imports and
test discovery consistent between running from the repository root and from an IDE.
Test module basenames must therefore stay unique across the whole tree.
"""
