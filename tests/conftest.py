"""Shared fixtures for envinject tests."""

import pytest

from envinject_cli.output.reporter import InjectionReporter


class RecordingReporter(InjectionReporter):
    """Reporter that records events in the order they are emitted."""

    def __init__(self):
        self.events = []

    def start(self, root, artifact_count, dry_run=False):
        self.events.append(("start", artifact_count))

    def token_resolved(self, name, placeholder, value):
        self.events.append(("resolved", name, value))

    def file_updated(self, replacement, root):
        self.events.append(("file", replacement.get_relative_path(root).as_posix(),
                            replacement.count))

    def token_not_found(self, name, placeholder):
        self.events.append(("not_found", name))

    def token_unresolved(self, warning):
        self.events.append(("unresolved", warning.name))

    def fatal(self, error, touched, root):
        self.events.append(("fatal", str(error), [p.relative_to(root).as_posix() for p in touched]))

    def complete(self, result):
        self.events.append(("complete", len(result.warnings)))

    def names(self):
        return [event[0] for event in self.events]


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def build_dir(tmp_path):
    """A small Next.js-like build output tree with baked placeholders."""
    root = tmp_path / ".next"
    (root / "static" / "chunks").mkdir(parents=True)
    (root / "static" / "css").mkdir(parents=True)
    (root / "server" / "app").mkdir(parents=True)

    (root / "static" / "chunks" / "app.js").write_text(
        'const cfg = {url: "__NEXT_PUBLIC_CW_APP_URL__", domain: "__NEXT_PUBLIC_CW_DOMAIN__"};\n',
        encoding="utf-8",
    )
    (root / "static" / "chunks" / "main.js").write_text(
        'window.location = "__NEXT_PUBLIC_REDIRECT_URL__";\n', encoding="utf-8"
    )
    (root / "static" / "css" / "site.css").write_text(
        'body { background: url("__NEXT_PUBLIC_CW_APP_URL__/bg.png"); }\n', encoding="utf-8"
    )
    (root / "server" / "app" / "index.html").write_text(
        '<a href="__NEXT_PUBLIC_CW_LOGIN_URL__">Login</a>'
        '<a href="__NEXT_PUBLIC_CW_APP_URL__">App</a>\n',
        encoding="utf-8",
    )
    # Not allow-listed: must never be rewritten
    (root / "server" / "app" / "page.json").write_text(
        '{"url": "__NEXT_PUBLIC_CW_APP_URL__"}\n', encoding="utf-8"
    )
    (root / "static" / "logo.png").write_bytes(b"\x89PNG\r\n__NEXT_PUBLIC_CW_APP_URL__\x00")
    return root
