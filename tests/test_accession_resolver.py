# tests/test_accession_resolver.py
import asyncio

from workspace_ingestion.accession_resolver import NullAccessionResolver, StaticAccessionResolver


def test_static_resolver_lookup(mock_logger):
    resolver = StaticAccessionResolver({"phs000424": "phs000424.v8.p2"}, mock_logger)
    assert asyncio.run(resolver.resolve("phs000424")) == "phs000424.v8.p2"
    assert asyncio.run(resolver.resolve("phs999999")) is None


def test_static_resolver_none_study_id():
    resolver = StaticAccessionResolver({"None": "should-not-match"})
    assert asyncio.run(resolver.resolve(None)) is None


def test_null_resolver():
    assert asyncio.run(NullAccessionResolver().resolve("phs000424")) is None


def test_from_yaml(tmp_path, mock_logger):
    path = tmp_path / "accessions.yaml"
    path.write_text("phs000424: phs000424.v8.p2\nphs001592: phs001592.v1.p1\n", encoding="utf-8")

    resolver = StaticAccessionResolver.from_yaml(str(path), mock_logger)

    assert len(resolver) == 2
    assert asyncio.run(resolver.resolve("phs001592")) == "phs001592.v1.p1"


def test_from_yaml_missing_file(tmp_path, mock_logger):
    resolver = StaticAccessionResolver.from_yaml(str(tmp_path / "absent.yaml"), mock_logger)
    assert len(resolver) == 0
    mock_logger.warning.assert_called_once()


def test_from_yaml_not_a_mapping(tmp_path, mock_logger):
    path = tmp_path / "accessions.yaml"
    path.write_text("- phs000424\n", encoding="utf-8")

    resolver = StaticAccessionResolver.from_yaml(str(path), mock_logger)

    assert len(resolver) == 0
    mock_logger.error.assert_called_once()


def test_from_yaml_parse_error(tmp_path, mock_logger):
    path = tmp_path / "accessions.yaml"
    path.write_text("phs000424: [unclosed\n", encoding="utf-8")

    resolver = StaticAccessionResolver.from_yaml(str(path), mock_logger)

    assert len(resolver) == 0
    mock_logger.error.assert_called_once()
