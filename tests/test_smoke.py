import asyncio
import unittest

from jqlens.api.v1.endpoints.analyze import list_queries
from jqlens.api.v1.endpoints.health import health_check
from jqlens.core.config import Settings
from jqlens.queries.catalog import PRESET_QUERIES


class SmokeTests(unittest.TestCase):
    def test_health_route(self) -> None:
        response = asyncio.run(health_check(Settings(_env_file=None, jq_binary="definitely-not-a-jq-binary")))
        self.assertEqual(response['status'], 'healthy')
        self.assertFalse(response['jq_available'])

    def test_list_queries_returns_every_preset(self) -> None:
        body = asyncio.run(list_queries(PRESET_QUERIES))
        self.assertEqual(body['default'], 'Context Count')
        self.assertEqual(len(body['queries']), 4)


if __name__ == '__main__':
    unittest.main()
