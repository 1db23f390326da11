#!/usr/bin/env python3
import os
import re
import sys

VERSIONED_FILES = [
    # (path, pattern, replacement template)
    ('jdsig/__init__.py', r'__version__ = "[^"]+"', '__version__ = "{version}"'),
    ('jdsig/signer.py', r"DEFAULT_USER_AGENT = 'JdcloudSdkPython/[^']+'", "DEFAULT_USER_AGENT = 'JdcloudSdkPython/{version}'"),
]


def bump_version(current: str, bump_type: str) -> str:
    major, minor, patch = map(int, current.split('.'))
    if bump_type == 'major':
        return f"{major + 1}.0.0"
    elif bump_type == 'minor':
        return f"{major}.{minor + 1}.0"
    elif bump_type == 'patch':
        return f"{major}.{minor}.{patch + 1}"
    else:
        raise ValueError(f"Invalid bump type: {bump_type}")


def rewrite(path: str, pattern: str, replacement: str) -> None:
    with open(path, 'r') as f:
        content = f.read()
    new_content, count = re.subn(pattern, replacement, content, count=1)
    if not count:
        print(f"Error: Could not find version in {path}", file=sys.stderr)
        sys.exit(1)
    with open(path, 'w') as f:
        f.write(new_content)


def main():
    if len(sys.argv) != 2:
        print("Usage: bump_version.py <major|minor|patch>", file=sys.stderr)
        sys.exit(1)

    bump_type = sys.argv[1]

    with open('pyproject.toml', 'r') as f:
        match = re.search(r'^version = "([^"]+)"', f.read(), re.MULTILINE)
    if not match:
        print("Error: Could not find version in pyproject.toml", file=sys.stderr)
        sys.exit(1)
    current_version = match.group(1)

    new_version = bump_version(current_version, bump_type)

    rewrite('pyproject.toml', r'(?m)^version = "[^"]+"', f'version = "{new_version}"')
    for path, pattern, template in VERSIONED_FILES:
        rewrite(path, pattern, template.format(version=new_version))

    # Output for GitHub Actions
    github_output = os.environ.get('GITHUB_OUTPUT')
    if github_output:
        with open(github_output, 'a') as f:
            f.write(f"current_version={current_version}\n")
            f.write(f"new_version={new_version}\n")
    else:
        # Local usage: print to stdout
        print(f"Bumped version: {current_version} -> {new_version}")


if __name__ == '__main__':
    main()
