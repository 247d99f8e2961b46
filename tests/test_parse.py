"""Tests for the lock file parse entrypoint."""

import json

import pytest

from npm_lockfile import (
    JsonSyntaxError,
    LockVersion,
    MalformedEntry,
    MissingPackagesField,
    ParseError,
    UnsupportedVersion,
    V1Dependency,
    V2Dependency,
    parse,
)


def expected_v1_highlight() -> V1Dependency:
    return V1Dependency(
        name="@babel/highlight",
        version="7.18.6",
        resolved="https://registry.npmjs.org/@babel/highlight/-/highlight-7.18.6.tgz",
        integrity="sha512-u7stbOuYjaPezCuLj29hNW1v64M2Md2qupEKP1fHc7WdOA3DgLh37suiSrZYY7haUB7iBeQZ9P1uiRF359do3g==",
        dev=True,
        requires={
            "@babel/helper-validator-identifier": "^7.18.6",
            "chalk": "^2.0.0",
            "js-tokens": "^4.0.0",
        },
        dependencies={
            "js-tokens": V1Dependency(
                name="js-tokens",
                version="4.0.0",
                resolved="https://registry.npmjs.org/js-tokens/-/js-tokens-4.0.0.tgz",
                integrity="sha512-RdJUflcE3cUzKiMqQgsCu06FPu9UdIJO0beYbPhHN4k6apgJtifcoCtT9bcxOpYBtpD2kCM6Sbzg4CausW/PKQ==",
                dev=True,
            )
        },
    )


def expected_v2_highlight() -> V2Dependency:
    return V2Dependency(
        path="node_modules/@babel/highlight",
        name="@babel/highlight",
        version="7.18.6",
        resolved="https://registry.npmjs.org/@babel/highlight/-/highlight-7.18.6.tgz",
        integrity="sha512-u7stbOuYjaPezCuLj29hNW1v64M2Md2qupEKP1fHc7WdOA3DgLh37suiSrZYY7haUB7iBeQZ9P1uiRF359do3g==",
        dev=True,
        dependencies={
            "@babel/helper-validator-identifier": "^7.18.6",
            "chalk": "^2.0.0",
            "js-tokens": "^4.0.0",
        },
        engines={"node": ">=6.9.0"},
    )


class TestLockfileVersions:
    def test_parse_v1_fixture(self, read_fixture):
        document = parse(read_fixture("v1-package-lock.json"))

        assert document.lockfile_version is LockVersion.V1
        assert document.name == "cxtl"
        assert document.version == "1.0.0"
        assert document.requires is True
        assert document.v2_dependencies == {}
        assert list(document.v1_dependencies) == [
            "@babel/code-frame",
            "@babel/helper-validator-identifier",
            "@babel/highlight",
            "chalk",
            "fsevents",
            "js-tokens",
        ]
        assert document.v1_dependencies["@babel/highlight"] == expected_v1_highlight()

    def test_parse_v2_fixture_populates_both_views(self, read_fixture):
        document = parse(read_fixture("v2-package-lock.json"))

        assert document.lockfile_version is LockVersion.V2
        assert document.v1_dependencies["@babel/highlight"] == expected_v1_highlight()
        assert document.v2_dependencies["node_modules/@babel/highlight"] == expected_v2_highlight()

        for name in document.v1_dependencies:
            assert f"node_modules/{name}" in document.v2_dependencies

    def test_parse_v3_fixture(self, read_fixture):
        document = parse(read_fixture("v3-package-lock.json"))

        assert document.lockfile_version is LockVersion.V3
        assert document.name == "cxtl"
        assert document.v1_dependencies == {}
        assert document.v2_dependencies["node_modules/@babel/highlight"] == expected_v2_highlight()
        assert "" not in document.v2_dependencies
        assert len(document.v2_dependencies) == 6

    def test_v3_ignores_legacy_dependencies(self):
        text = json.dumps(
            {
                "lockfileVersion": 3,
                "packages": {},
                "dependencies": {"lodash": {"version": "4.17.21"}},
            }
        )
        assert parse(text).v1_dependencies == {}

    def test_v1_ignores_packages(self):
        text = json.dumps(
            {"lockfileVersion": 1, "packages": {"node_modules/lodash": {"version": "4.17.21"}}}
        )
        assert parse(text).v2_dependencies == {}

    def test_v2_without_dependencies_is_empty_tree(self):
        text = json.dumps(
            {"lockfileVersion": 2, "packages": {"node_modules/a": {"version": "1.0.0"}}}
        )
        document = parse(text)
        assert document.v1_dependencies == {}
        assert list(document.v2_dependencies) == ["node_modules/a"]

    def test_parse_is_repeatable(self, read_fixture):
        text = read_fixture("v2-package-lock.json")
        assert parse(text) == parse(text)

    def test_parse_accepts_bytes(self, read_fixture):
        text = read_fixture("v3-package-lock.json")
        assert parse(text.encode("utf-8")) == parse(text)

    def test_parse_rejects_invalid_utf8_bytes(self):
        with pytest.raises(JsonSyntaxError) as exc:
            parse(b'{"lockfileVersion": 1, "name": "\xff"}')
        assert isinstance(exc.value, ParseError)
        assert isinstance(exc.value.__cause__, UnicodeDecodeError)


class TestScenarios:
    def test_minimal_v1(self):
        document = parse('{"lockfileVersion":1,"dependencies":{"lodash":{"version":"4.17.21"}}}')

        assert document.v1_dependencies == {
            "lodash": V1Dependency(name="lodash", version="4.17.21"),
        }
        lodash = document.v1_dependencies["lodash"]
        assert (lodash.dev, lodash.optional, lodash.bundled) == (False, False, False)
        assert lodash.dependencies == {}
        assert document.name == ""
        assert document.version == ""

    def test_minimal_v3(self):
        document = parse(
            '{"lockfileVersion":3,"packages":{"":{"name":"root","version":"1.0.0"},'
            '"node_modules/lodash":{"version":"4.17.21","integrity":"sha512-abc"}}}'
        )

        assert list(document.v2_dependencies) == ["node_modules/lodash"]
        lodash = document.v2_dependencies["node_modules/lodash"]
        assert lodash.name == "lodash"
        assert lodash.integrity == "sha512-abc"
        assert lodash.resolved is None

    def test_root_entry_fills_missing_metadata(self):
        document = parse(
            '{"lockfileVersion":3,"packages":{"":{"name":"root","version":"1.0.0"}}}'
        )
        assert (document.name, document.version) == ("root", "1.0.0")

    def test_top_level_metadata_wins_over_root_entry(self):
        document = parse(
            '{"name":"top","version":"2.0.0","lockfileVersion":3,'
            '"packages":{"":{"name":"root","version":"1.0.0"}}}'
        )
        assert (document.name, document.version) == ("top", "2.0.0")

    def test_missing_version_defaults_to_empty_string(self):
        document = parse('{"lockfileVersion":1,"dependencies":{"bundled":{"bundled":true}}}')
        entry = document.v1_dependencies["bundled"]
        assert entry.version == ""
        assert entry.bundled is True


class TestErrors:
    @pytest.mark.parametrize(
        "payload",
        [
            {"lockfileVersion": 4, "packages": {}},
            {"lockfileVersion": 0},
            {"packages": {}},
            {"lockfileVersion": "3"},
            {"lockfileVersion": 2.0},
            {"lockfileVersion": True},
            {"lockfileVersion": None},
        ],
    )
    def test_unsupported_version(self, payload):
        with pytest.raises(UnsupportedVersion):
            parse(json.dumps(payload))

    def test_unsupported_version_keeps_value(self):
        with pytest.raises(UnsupportedVersion) as exc:
            parse('{"lockfileVersion": 4}')
        assert exc.value.value == 4
        assert "4" in str(exc.value)

    @pytest.mark.parametrize("version", [2, 3])
    def test_missing_packages(self, version):
        with pytest.raises(MissingPackagesField) as exc:
            parse(json.dumps({"lockfileVersion": version, "dependencies": {}}))
        assert exc.value.lockfile_version == version

    def test_packages_not_an_object(self):
        with pytest.raises(MalformedEntry) as exc:
            parse('{"lockfileVersion": 3, "packages": "not an object"}')
        assert exc.value.path == ("packages",)

    def test_package_entry_not_an_object(self):
        with pytest.raises(MalformedEntry) as exc:
            parse('{"lockfileVersion": 3, "packages": {"node_modules/a": []}}')
        assert exc.value.path == ("packages", "node_modules/a")

    def test_nested_v1_entry_not_an_object(self):
        text = json.dumps(
            {
                "lockfileVersion": 1,
                "dependencies": {"a": {"version": "1.0.0", "dependencies": {"b": "1.0.0"}}},
            }
        )
        with pytest.raises(MalformedEntry) as exc:
            parse(text)
        assert exc.value.path == ("dependencies", "a", "dependencies", "b")

    def test_wrong_scalar_type(self):
        with pytest.raises(MalformedEntry) as exc:
            parse('{"lockfileVersion": 1, "dependencies": {"a": {"version": 1}}}')
        assert exc.value.path == ("dependencies", "a", "version")

    def test_wrong_flag_type(self):
        with pytest.raises(MalformedEntry):
            parse('{"lockfileVersion": 3, "packages": {"node_modules/a": {"dev": "yes"}}}')

    def test_root_not_an_object(self):
        with pytest.raises(MalformedEntry):
            parse("[1, 2, 3]")

    def test_invalid_json(self):
        with pytest.raises(JsonSyntaxError) as exc:
            parse('{"lockfileVersion": 1,')
        assert exc.value.lineno == 1
        assert isinstance(exc.value.__cause__, json.JSONDecodeError)
