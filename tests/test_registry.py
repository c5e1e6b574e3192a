import threading
import time
import unittest
from unittest import mock

import numpy as np

from camera_models import (
    CAMERA_MODELS,
    CameraModelType,
    INVALID_CAMERA_MODEL_ID,
    INVALID_CAMERA_MODEL_NAME,
    initialize_registry,
    camera_model_name_to_id,
    camera_model_id_to_name,
    exists_camera_model_with_name,
    exists_camera_model_with_id,
)
from camera_models import registry
from camera_models.types import CameraModel


class TestRegistry(unittest.TestCase):
    """Tests for the camera model name <-> id registry."""

    def test_round_trip(self):
        """Every registered name and id maps back to itself."""
        for model in CAMERA_MODELS:
            self.assertEqual(camera_model_name_to_id(model.model_name), model.model_id)
            self.assertEqual(camera_model_id_to_name(model.model_id), model.model_name)
            self.assertEqual(camera_model_id_to_name(camera_model_name_to_id(model.model_name)), model.model_name)
            self.assertEqual(camera_model_name_to_id(camera_model_id_to_name(model.model_id)), model.model_id)

    def test_known_ids(self):
        self.assertEqual(camera_model_name_to_id("SIMPLE_PINHOLE"), 0)
        self.assertEqual(camera_model_name_to_id("PINHOLE"), 1)
        self.assertEqual(camera_model_name_to_id("THIN_PRISM_FISHEYE"), 10)
        self.assertEqual(camera_model_id_to_name(CameraModelType.OPENCV.value), "OPENCV")

    def test_unknown_inputs(self):
        """Unknown names and ids produce sentinels instead of raising."""
        self.assertEqual(camera_model_name_to_id("not_a_model"), INVALID_CAMERA_MODEL_ID)
        self.assertEqual(camera_model_name_to_id("pinhole"), INVALID_CAMERA_MODEL_ID) # case sensitive
        self.assertEqual(camera_model_name_to_id(""), INVALID_CAMERA_MODEL_ID)
        self.assertEqual(camera_model_name_to_id(["PINHOLE"]), INVALID_CAMERA_MODEL_ID)
        self.assertEqual(camera_model_id_to_name(INVALID_CAMERA_MODEL_ID), "INVALID_CAMERA_MODEL")
        self.assertEqual(camera_model_id_to_name(11), INVALID_CAMERA_MODEL_NAME)
        self.assertEqual(camera_model_id_to_name([1]), INVALID_CAMERA_MODEL_NAME)

    def test_exists(self):
        self.assertTrue(exists_camera_model_with_name("OPENCV_FISHEYE"))
        self.assertFalse(exists_camera_model_with_name("OPENCV_FISHEYE2"))
        self.assertTrue(exists_camera_model_with_id(7))
        self.assertFalse(exists_camera_model_with_id(-1))
        self.assertFalse(exists_camera_model_with_id(1000))

    def test_tables_are_read_only(self):
        table = registry.get_name_to_id_table()
        with self.assertRaises(TypeError):
            table["NEW_MODEL"] = 42
        self.assertEqual(len(table), len(CAMERA_MODELS))
        self.assertEqual(len(registry.get_id_to_name_table()), len(CAMERA_MODELS))

    def test_initialize_is_idempotent(self):
        initialize_registry()
        table = registry.get_id_to_name_table()
        initialize_registry()
        self.assertIs(registry.get_id_to_name_table(), table)

    def test_concurrent_first_use(self):
        """Threads racing on first use build the tables exactly once."""
        self.addCleanup(setattr, registry, "_NAME_TO_ID", registry.get_name_to_id_table())
        self.addCleanup(setattr, registry, "_ID_TO_NAME", registry.get_id_to_name_table())
        registry._NAME_TO_ID = None
        registry._ID_TO_NAME = None

        num_threads = 8
        barrier = threading.Barrier(num_threads)
        build_tables = registry._build_tables
        results = []
        errors = []

        def slow_build(models):
            time.sleep(0.01) # widen the race window
            return build_tables(models)

        def worker():
            try:
                barrier.wait()
                for model in CAMERA_MODELS:
                    results.append(camera_model_id_to_name(camera_model_name_to_id(model.model_name)) == model.model_name)
            except Exception as e:
                errors.append(e)

        with mock.patch.object(registry, "_build_tables", side_effect=slow_build) as patched_build:
            threads = [threading.Thread(target=worker) for _ in range(num_threads)]
            for thread in threads: thread.start()
            for thread in threads: thread.join()

        self.assertEqual(errors, [])
        self.assertEqual(patched_build.call_count, 1)
        self.assertEqual(len(results), num_threads * len(CAMERA_MODELS))
        self.assertTrue(all(results))

    def test_non_integer_ids(self):
        """Bools, floats and strings are not model ids, numpy integers are."""
        for model_id in (True, False, 1.0, 0.0, "1", None):
            self.assertEqual(camera_model_id_to_name(model_id), INVALID_CAMERA_MODEL_NAME)
            self.assertFalse(exists_camera_model_with_id(model_id))
        self.assertEqual(camera_model_id_to_name(np.int64(1)), "PINHOLE")
        self.assertEqual(camera_model_id_to_name(np.uint8(4)), "OPENCV")

    def test_duplicate_models_rejected(self):
        model_a = CameraModel(100, "A", 3, "f, cx, cy", (0,), (1, 2), ())
        model_b = CameraModel(100, "B", 3, "f, cx, cy", (0,), (1, 2), ())
        model_c = CameraModel(101, "A", 3, "f, cx, cy", (0,), (1, 2), ())
        model_invalid = CameraModel(INVALID_CAMERA_MODEL_ID, "C", 3, "f, cx, cy", (0,), (1, 2), ())

        with self.assertRaises(ValueError):
            registry._build_tables([model_a, model_b])
        with self.assertRaises(ValueError):
            registry._build_tables([model_a, model_c])
        with self.assertRaises(ValueError):
            registry._build_tables([model_invalid])


if __name__ == "__main__":
    unittest.main()
