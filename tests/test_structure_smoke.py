from pathlib import Path


def test_required_scaffold_files_exist() -> None:
    repo_root = Path(__file__).resolve().parents[1]

    required = [
        repo_root / "pyproject.toml",
        repo_root / "src" / "hashed_assets" / "__init__.py",
        repo_root / "tools" / "assets" / "hash_assets.py",
        repo_root / "tools" / "assets" / "fetch_assets.py",
    ]

    missing = [str(p.relative_to(repo_root)) for p in required if not p.exists()]
    assert not missing, f"Missing required scaffold files: {missing}"
