"""Generation of rust-project.json so rust-analyzer understands exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One exercise file seen by rust-analyzer as its own crate."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """Contents of the rust-project.json file."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def add_path(self, path: str) -> None:
        """Add a crate when the text after the first dot is 'rs'."""
        _, dot, extension = str(path).partition(".")
        if dot and extension == "rs":
            self.crates.append(Crate(root_module=str(path)))

    def exercises_to_json(self, root: str | Path = "exercises") -> None:
        """Add a crate for every .rs file below root."""
        for entry in sorted(Path(root).glob("**/*")):
            self.add_path(str(entry))

    def get_sysroot_src(self) -> None:
        """Find the standard library sources, from RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return
        result = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
        text = (result.stdout or b"").decode("utf-8", errors="replace")
        words = text.split()
        toolchain = words[0] if words else text
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(
            Path(toolchain).joinpath("lib", "rustlib", "src", "rust", "library")
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def write_to_disk(self, path: str | Path = "./rust-project.json") -> None:
        Path(path).write_text(
            json.dumps(self.to_dict(), separators=(",", ":")), encoding="utf-8"
        )