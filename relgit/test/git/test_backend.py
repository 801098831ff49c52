"""Tests for relgit.git.backend module."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from unittest.mock import patch

from relgit.core.result import Err, Ok, Result
from relgit.git.backend import (
    CliObjectStore,
    CliWorktree,
    GitCommandRunner,
    Ref,
    Remote,
    Signature,
)
from relgit.platform.process import ProcessError

ROOT = Path("/repo")


class ScriptedRunner:
    """CommandRunner returning canned results keyed by argument tuple."""

    def __init__(self, responses: dict[tuple[str, ...], Result[str, ProcessError]]) -> None:
        self.responses = responses
        self.calls: list[tuple[str, ...]] = []

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        network: bool = False,
        timeout: float | None = None,
    ) -> Result[str, ProcessError]:
        key = tuple(args)
        self.calls.append(key)
        return self.responses.get(key, Ok(""))


def _fail(args: tuple[str, ...], code: int = 1, stderr: str = "") -> Err[ProcessError]:
    return Err(ProcessError(("git", *args), code, "", stderr))


class TestRef:
    def test_short_names(self) -> None:
        assert Ref("refs/heads/master", "a").short == "master"
        assert Ref("refs/tags/v1.0.0", "a").short == "v1.0.0"
        assert Ref("refs/remotes/origin/master", "a").short == "origin/master"
        assert Ref("HEAD", "a").short == "HEAD"

    def test_kind(self) -> None:
        assert Ref("refs/heads/x", "a").is_branch
        assert Ref("refs/tags/x", "a").is_tag
        assert not Ref("HEAD", "a").is_branch


class TestSignature:
    def test_str(self) -> None:
        assert str(Signature("Jane", "jane@example.com")) == "Jane <jane@example.com>"


class TestGitCommandRunner:
    def test_prefixes_executable_and_uses_timeouts(self) -> None:
        with patch("relgit.git.backend.run_process", return_value=Ok("out")) as mock_run:
            runner = GitCommandRunner()
            assert runner.run(["status"], cwd=ROOT) == Ok("out")
            runner.run(["fetch"], network=True)
            runner.run(["clone"], timeout=5.0)

        first, second, third = mock_run.call_args_list
        assert first.args[0] == ["git", "status"]
        assert first.kwargs["cwd"] == ROOT
        assert first.kwargs["timeout"] == 30.0
        assert second.kwargs["timeout"] == 180.0
        assert third.kwargs["timeout"] == 5.0


class TestCliObjectStore:
    def test_branches(self) -> None:
        runner = ScriptedRunner(
            {
                ("for-each-ref", "--format=%(refname)\t%(objectname)", "refs/heads"): Ok(
                    "refs/heads/master\taaa\nrefs/heads/release-1.20\tbbb\n"
                ),
            }
        )

        result = CliObjectStore(ROOT, runner).branches()

        assert result == Ok([Ref("refs/heads/master", "aaa"), Ref("refs/heads/release-1.20", "bbb")])

    def test_head_on_branch(self) -> None:
        runner = ScriptedRunner(
            {
                ("rev-parse", "--verify", "--quiet", "HEAD^{commit}"): Ok("abc\n"),
                ("symbolic-ref", "-q", "HEAD"): Ok("refs/heads/master\n"),
            }
        )

        assert CliObjectStore(ROOT, runner).head() == Ok(Ref("refs/heads/master", "abc"))

    def test_head_detached(self) -> None:
        runner = ScriptedRunner(
            {
                ("rev-parse", "--verify", "--quiet", "HEAD^{commit}"): Ok("abc\n"),
                ("symbolic-ref", "-q", "HEAD"): _fail(("symbolic-ref",)),
            }
        )

        assert CliObjectStore(ROOT, runner).head() == Ok(Ref("HEAD", "abc"))

    def test_resolve_revision_not_found(self) -> None:
        key = ("rev-parse", "--verify", "--quiet", "origin/nope^{commit}")
        runner = ScriptedRunner({key: _fail(key)})

        result = CliObjectStore(ROOT, runner).resolve_revision("origin/nope")

        assert isinstance(result, Err)
        assert result.error.kind == "not_found"
        assert result.error.message == "reference not found: origin/nope"

    def test_merge_base_unrelated(self) -> None:
        key = ("merge-base", "--all", "a", "b")
        runner = ScriptedRunner({key: _fail(key)})

        assert CliObjectStore(ROOT, runner).merge_base("a", "b") == Ok([])

    def test_merge_base_failure(self) -> None:
        key = ("merge-base", "--all", "a", "b")
        runner = ScriptedRunner({key: _fail(key, 128, "fatal: Not a valid object name a")})

        result = CliObjectStore(ROOT, runner).merge_base("a", "b")

        assert isinstance(result, Err)
        assert result.error.kind == "operation"

    def test_remotes(self) -> None:
        runner = ScriptedRunner(
            {
                ("config", "--get-regexp", r"^remote\..*\.url$"): Ok(
                    "remote.origin.url https://github.com/a/b\n"
                    "remote.origin.url git@github.com:a/b\n"
                    "remote.fork.url https://github.com/c/b\n"
                ),
            }
        )

        result = CliObjectStore(ROOT, runner).remotes()

        assert result == Ok(
            [
                Remote("origin", ("https://github.com/a/b", "git@github.com:a/b")),
                Remote("fork", ("https://github.com/c/b",)),
            ]
        )

    def test_no_remotes(self) -> None:
        key = ("config", "--get-regexp", r"^remote\..*\.url$")
        runner = ScriptedRunner({key: _fail(key)})

        assert CliObjectStore(ROOT, runner).remotes() == Ok([])

    def test_create_remote_with_extra_urls(self) -> None:
        runner = ScriptedRunner({})

        result = CliObjectStore(ROOT, runner).create_remote("up", ["u1", "u2"])

        assert result == Ok(None)
        assert runner.calls == [
            ("remote", "add", "up", "u1"),
            ("remote", "set-url", "--add", "up", "u2"),
        ]

    def test_create_remote_requires_url(self) -> None:
        result = CliObjectStore(ROOT, ScriptedRunner({})).create_remote("up", [])

        assert isinstance(result, Err)
        assert result.error.kind == "invalid_input"

    def test_list_remote_refs(self) -> None:
        runner = ScriptedRunner(
            {
                ("ls-remote", "origin"): Ok(
                    "aaa\tHEAD\nbbb\trefs/heads/master\nccc\trefs/tags/v1.0.0\n"
                ),
            }
        )

        result = CliObjectStore(ROOT, runner).list_remote_refs("origin")

        assert result == Ok(
            [Ref("HEAD", "aaa"), Ref("refs/heads/master", "bbb"), Ref("refs/tags/v1.0.0", "ccc")]
        )

    def test_merged_tags(self) -> None:
        key = (
            "for-each-ref",
            "--merged=abc",
            "--sort=-creatordate",
            "--format=%(refname)",
            "refs/tags",
        )
        runner = ScriptedRunner({key: Ok("refs/tags/v1.0.1\nrefs/tags/v1.0.0\n")})

        assert CliObjectStore(ROOT, runner).merged_tags("abc") == Ok(["v1.0.1", "v1.0.0"])


class TestCliWorktree:
    def test_commit_returns_new_sha(self) -> None:
        runner = ScriptedRunner({("rev-parse", "HEAD"): Ok("deadbeef\n")})
        author = Signature("Bot", "bot@example.com")

        result = CliWorktree(ROOT, runner).commit("msg", author)

        assert result == Ok("deadbeef")
        assert runner.calls[0] == (
            "-c",
            "user.name=Bot",
            "-c",
            "user.email=bot@example.com",
            "commit",
            "--author",
            "Bot <bot@example.com>",
            "-m",
            "msg",
        )

    def test_commit_failure_names_subcommand(self) -> None:
        runner = ScriptedRunner({})
        runner.responses[
            ("-c", "user.name=Bot", "-c", "user.email=b@x", "commit", "--author", "Bot <b@x>", "-m", "m")
        ] = _fail(("commit",), 1, "nothing to commit")

        result = CliWorktree(ROOT, runner).commit("m", Signature("Bot", "b@x"))

        assert isinstance(result, Err)
        assert result.error.message.startswith("running git commit:")
        assert result.error.hint == "nothing to commit"

    def test_status(self) -> None:
        runner = ScriptedRunner({("status", "--porcelain=v1", "-b"): Ok("## master\n?? x\n")})

        result = CliWorktree(ROOT, runner).status()

        assert isinstance(result, Ok)
        assert result.value.branch == "master"
        assert not result.value.is_clean

    def test_checkout(self) -> None:
        runner = ScriptedRunner({("checkout", "release-1.20"): Ok("")})

        assert CliWorktree(ROOT, runner).checkout("release-1.20") == Ok(None)
        assert runner.calls == [("checkout", "release-1.20")]
