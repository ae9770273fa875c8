""" Tests for the HTTPClient class """

import pytest
from flexmock import flexmock

import requests
from requests.models import Response

from randomreddit import httpclient
from randomreddit.httpclient import HTTPClient, RetryLimitExceededException


def scripted(*outcomes):
    """ Returns a fake of requests.request that answers or raises the outcomes in order """
    remaining = list(outcomes)

    def fake_request(*_, **__):
        outcome = remaining.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
    return fake_request


def test_successful_request():
    """ Tests a successful request """
    mock_response = Response()
    flexmock(requests).should_receive('request').and_return(mock_response).once()

    client = HTTPClient()
    response = client.request("GET", "https://example.com")
    assert response == mock_response


def test_retry_logic():
    """ Tests the retry logic """
    mock_response = Response()
    # faking the delay for testing
    flexmock(httpclient).should_receive('sleep').times(2)
    flexmock(requests).should_receive('request').replace_with(scripted(
        requests.exceptions.ConnectionError(),
        requests.exceptions.ReadTimeout(),
        mock_response,
    ))

    client = HTTPClient()
    response = client.request("GET", "https://example.com", max_tries=3)
    assert response == mock_response


def test_retry_limit_exceeded():
    """ Tests the retry limit mechanism """
    flexmock(httpclient).should_receive('sleep').once()
    flexmock(requests).should_receive('request').and_raise(requests.exceptions.ConnectionError).times(2)

    client = HTTPClient()
    with pytest.raises(RetryLimitExceededException):
        client.request("GET", "https://example.com", max_tries=2)


def test_get_method():
    """ Tests the GET method"""
    mock_response = Response()
    flexmock(requests).should_receive('request').with_args("GET", "https://example.com", params={}, headers={}, timeout=30).and_return(mock_response)

    client = HTTPClient()
    response = client.get("https://example.com")
    assert response == mock_response


def test_request_headers_are_merged():
    """ Tests that per-request headers extend the client headers """
    mock_response = Response()
    flexmock(requests).should_receive('request').with_args(
        "GET", "https://example.com", params={"q": 1},
        headers={"User-Agent": "agent", "Authorization": "bearer token"}, timeout=30
    ).and_return(mock_response)

    client = HTTPClient({"User-Agent": "agent"})
    response = client.get("https://example.com", {"q": 1}, headers={"Authorization": "bearer token"})
    assert response == mock_response
