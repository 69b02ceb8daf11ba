from supercollections import __version__
import os
import re


def test_version_in_pyproject_toml_is_consistent_with_package_version() -> None:
    pyproject_toml_filepath = os.path.join(
        os.path.dirname(__file__), '..', 'pyproject.toml')
    with open(pyproject_toml_filepath, encoding='utf-8') as f:
        pyproject_toml = f.read()
    
    m = re.search(r'\nversion *= *"([^"]+?)(\.post\d+)?\"\n', pyproject_toml)
    assert m is not None, 'Unable to find version in pyproject.toml'
    pyproject_toml_version = m.group(1)
    assert __version__ == pyproject_toml_version, \
        'Version in pyproject.toml and supercollections/__init__.py are not the same'
