#!/usr/bin/env python3
"""Tests for the request executor in GeniusClient."""

import os
import unittest
from unittest.mock import Mock, patch

import httpx

from genius_client.api.client import GeniusClient, create_genius_client
from genius_client.api.credentials import CredentialStore
from genius_client.api.errors import MissingCredentialError, RequestFailedError
from genius_client.config import Env
from tests.helpers.fake_genius import BASE_URL, TEST_TOKEN, FakeGenius


class TestExecute(unittest.TestCase):
    def setUp(self):
        self.fake = FakeGenius(
            routes={
                "/songs/1": {
                    "meta": {"status": 200},
                    "response": {"song": {"id": 1, "primary_artist": {"id": 7, "name": "X"}}},
                },
                "/referents": {"meta": {"status": 200}, "response": {"referents": []}},
            }
        )
        self.client = self.fake.client()

    def tearDown(self):
        self.client.close()

    def test_sends_bearer_token_and_accept_header(self):
        self.client.execute("songs/1")
        request = self.fake.last_request
        self.assertEqual(request.headers["Authorization"], f"Bearer {TEST_TOKEN}")
        self.assertEqual(request.headers["Accept"], "application/json")
        self.assertEqual(str(request.url).split("?")[0], f"{BASE_URL}/songs/1")

    def test_returns_parsed_json_with_nested_objects(self):
        data = self.client.execute("songs/1")
        self.assertEqual(data["response"]["song"]["primary_artist"]["name"], "X")

    def test_none_params_are_omitted(self):
        self.client.execute("referents", {"song_id": 5, "web_page_id": None, "page": None})
        params = self.fake.last_params()
        self.assertEqual(params, {"song_id": "5"})
        self.assertNotIn("page=", str(self.fake.last_request.url))

    def test_text_format_added_to_query(self):
        self.client.execute("songs/1", text_format="plain")
        self.assertEqual(self.fake.last_params(), {"text_format": "plain"})

    def test_invalid_text_format_rejected_before_request(self):
        with self.assertRaises(ValueError):
            self.client.execute("songs/1", text_format="markdown")
        self.assertEqual(self.fake.call_count, 0)

    def test_non_200_raises_with_status_and_verbatim_body(self):
        with self.assertRaises(RequestFailedError) as cm:
            self.client.execute("songs/999999999")
        err = cm.exception
        self.assertEqual(err.status_code, 404)
        self.assertTrue(err.is_not_found)
        self.assertIn('"Not found"', err.body)
        self.assertEqual(str(err), f"Request failed with status: 404 - {err.body}")
        self.assertEqual(err.path, "songs/999999999")

    def test_unauthorized_message_contains_401(self):
        with self.fake.client(token="bad-token") as bad_client:
            with self.assertRaises(RequestFailedError) as cm:
                bad_client.execute("songs/1")
        self.assertIn("401", str(cm.exception))
        self.assertTrue(cm.exception.is_unauthorized)

    def test_server_error_is_not_retried(self):
        self.fake.routes["/songs/2"] = lambda request: httpx.Response(500, text="boom")
        with self.assertRaises(RequestFailedError) as cm:
            self.client.execute("songs/2")
        self.assertEqual(cm.exception.body, "boom")
        self.assertEqual(self.fake.call_count, 1)

    def test_rate_limit_reported_like_any_other_failure(self):
        self.fake.routes["/songs/3"] = lambda request: httpx.Response(429, text="slow down")
        with self.assertRaises(RequestFailedError) as cm:
            self.client.execute("songs/3")
        self.assertTrue(cm.exception.is_rate_limited)
        self.assertEqual(str(cm.exception), "Request failed with status: 429 - slow down")


class TestCredentials(unittest.TestCase):
    def test_missing_credential_fails_before_request(self):
        fake = FakeGenius()
        store = CredentialStore(env_var="GENIUS_TEST_TOKEN_UNSET")
        with patch.dict(os.environ, {"GENIUS_TEST_TOKEN_UNSET": ""}):
            client = GeniusClient(
                base_url=BASE_URL, credentials=store, http_client=fake.http_client()
            )
            with self.assertRaises(MissingCredentialError):
                client.execute("songs/1")
        self.assertEqual(fake.call_count, 0)

    def test_invalid_text_format_checked_before_prompting(self):
        fake = FakeGenius()
        prompt = Mock(return_value=TEST_TOKEN)
        store = CredentialStore(env_var=None, prompt=prompt)
        client = GeniusClient(base_url=BASE_URL, credentials=store, http_client=fake.http_client())
        with self.assertRaises(ValueError):
            client.execute("songs/1", text_format="markdown")
        prompt.assert_not_called()
        self.assertEqual(fake.call_count, 0)

    def test_prompted_token_is_used(self):
        fake = FakeGenius(routes={"/songs/1": {"response": {}}})
        store = CredentialStore(env_var=None, prompt=lambda message: f"  {TEST_TOKEN} ")
        client = GeniusClient(base_url=BASE_URL, credentials=store, http_client=fake.http_client())
        client.execute("songs/1")
        self.assertEqual(fake.last_request.headers["Authorization"], f"Bearer {TEST_TOKEN}")

    def test_clients_hold_independent_tokens(self):
        fake = FakeGenius(routes={"/songs/1": {"response": {}}})
        good = fake.client()
        bad = fake.client(token="other")
        good.execute("songs/1")
        with self.assertRaises(RequestFailedError):
            bad.execute("songs/1")
        self.assertEqual(good.credentials.get(), TEST_TOKEN)
        self.assertEqual(bad.credentials.get(), "other")

    def test_set_token_overwrites(self):
        fake = FakeGenius(routes={"/songs/1": {"response": {}}})
        client = fake.client(token="stale")
        client.set_token(TEST_TOKEN)
        client.execute("songs/1")
        self.assertEqual(fake.call_count, 1)


class TestCreateClient(unittest.TestCase):
    def tearDown(self):
        Env.reset()

    def test_uses_loaded_environment(self):
        Env.reset()
        import genius_client.config.env as env_module

        env_module._ENV = Env(GENIUS_API_TOKEN="from-env", GENIUS_API_BASE_URL=BASE_URL)
        client = create_genius_client()
        try:
            self.assertEqual(client.base_url, BASE_URL)
            self.assertEqual(client.credentials.get(), "from-env")
        finally:
            client.close()

    def test_explicit_arguments_win(self):
        client = create_genius_client(token="explicit", base_url="https://example.test/")
        try:
            self.assertEqual(client.base_url, "https://example.test")
            self.assertEqual(client.credentials.get(), "explicit")
        finally:
            client.close()


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
