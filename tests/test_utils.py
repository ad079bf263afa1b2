"""Tests for logging configuration."""

import logging

import pytest

from sdf2mesh import DistanceField, extract_mesh, sphere, translate
from sdf2mesh.utils import configure_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("sdf2mesh")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for h in [h for h in logger.handlers if h not in handlers]:
        logger.removeHandler(h)
        h.close()
    logger.setLevel(level)


class TestConfigureLogging:
    def test_sets_level_and_handler(self, package_logger):
        configure_logging(logging.DEBUG)
        assert package_logger.level == logging.DEBUG
        assert any(isinstance(h, logging.StreamHandler) for h in package_logger.handlers)

    def test_repeated_calls_do_not_duplicate_handlers(self, package_logger):
        before = len(package_logger.handlers)
        configure_logging(logging.INFO)
        configure_logging(logging.DEBUG)
        assert len(package_logger.handlers) == before + 1
        assert package_logger.level == logging.DEBUG

    def test_foreign_handlers_are_kept(self, package_logger):
        foreign = logging.NullHandler()
        package_logger.addHandler(foreign)
        configure_logging(logging.INFO)
        configure_logging(logging.INFO)
        assert foreign in package_logger.handlers

    def test_logfile(self, package_logger, tmp_path):
        path = tmp_path / "sdf2mesh.log"
        configure_logging(logging.DEBUG, logfile=str(path))
        field = DistanceField(8).draw_distance_function(translate(4, 4, 4, sphere(2.0)))
        extract_mesh(field)
        for h in package_logger.handlers:
            h.flush()
        assert "Extracted" in path.read_text()


class TestExtractionLogging:
    def test_summary(self, caplog):
        field = DistanceField(8).draw_distance_function(translate(4, 4, 4, sphere(2.0)))
        with caplog.at_level(logging.DEBUG, logger="sdf2mesh"):
            mesh = extract_mesh(field)
        assert f"Extracted {mesh.vertex_count} vertices" in caplog.text

    def test_boundary_faces_reported(self, caplog):
        field = DistanceField(8).draw_distance_function(translate(0.5, 4, 4, sphere(3.0)))
        with caplog.at_level(logging.DEBUG, logger="sdf2mesh"):
            extract_mesh(field)
        assert "boundary faces" in caplog.text
