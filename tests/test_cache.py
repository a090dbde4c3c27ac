import asyncio
import json
import sys
import unittest
from pathlib import Path
from unittest.mock import AsyncMock, patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from proscore.scoring.keywords import TAXONOMY_VERSION  # noqa: E402
from proscore.services.cache import cache_get_json, cache_set_json, score_cache_key  # noqa: E402


class CacheKeyTests(unittest.TestCase):
    def test_key_is_scoped_to_taxonomy_version(self):
        key = score_cache_key("Software Engineer", "resume")
        self.assertTrue(key.startswith(f"proscore:score:{TAXONOMY_VERSION}:"))

    def test_role_case_and_padding_do_not_matter(self):
        self.assertEqual(
            score_cache_key("Software Engineer", "resume"),
            score_cache_key("  software engineer ", "resume"),
        )

    def test_text_and_role_change_the_key(self):
        base = score_cache_key("General", "resume")
        self.assertNotEqual(base, score_cache_key("General", "resume v2"))
        self.assertNotEqual(base, score_cache_key("Data Analyst", "resume"))


class CacheHelperTests(unittest.TestCase):
    def test_helpers_are_no_ops_without_redis(self):
        with patch("proscore.services.cache.get_redis_client", return_value=None):
            self.assertIsNone(asyncio.run(cache_get_json("key")))
            self.assertIsNone(asyncio.run(cache_set_json("key", {"a": 1}, ttl=60)))

    def test_round_trip_through_client(self):
        client = AsyncMock()
        client.get.return_value = json.dumps({"overallScore": 81})
        with patch("proscore.services.cache.get_redis_client", return_value=client):
            asyncio.run(cache_set_json("key", {"overallScore": 81}, ttl=60))
            value = asyncio.run(cache_get_json("key"))

        client.set.assert_awaited_once_with("key", json.dumps({"overallScore": 81}), ex=60)
        self.assertEqual(value, {"overallScore": 81})

    def test_redis_errors_are_treated_as_misses(self):
        client = AsyncMock()
        client.get.side_effect = ConnectionError("redis down")
        with patch("proscore.services.cache.get_redis_client", return_value=client):
            self.assertIsNone(asyncio.run(cache_get_json("key")))


if __name__ == "__main__":
    unittest.main()
