import json

from cobo_custody import create_wallet, get_deposit_address, withdraw_eth

from conftest import BASE_URL, FakeResponse


def sent_body(client):
    [call] = client.session.calls
    return call["method"], call["url"], json.loads(call["data"])


def test_create_wallet(make_client):
    client = make_client(FakeResponse(200, {"wallet_id": "w1", "name": "Treasury"}))

    result = create_wallet("Treasury", client=client)

    assert result["wallet_id"] == "w1"
    assert sent_body(client) == (
        "POST", BASE_URL + "/v2/wallets", {"name": "Treasury", "wallet_type": "Custodial"},
    )


def test_get_deposit_address_takes_first_of_list(make_client):
    client = make_client(FakeResponse(200, [{"address": "0xabc"}, {"address": "0xdef"}]))

    assert get_deposit_address("w1", client=client) == "0xabc"
    assert sent_body(client) == ("POST", BASE_URL + "/v2/wallets/w1/addresses", {"chain_id": "ETH"})


def test_get_deposit_address_single_object(make_client):
    client = make_client(FakeResponse(200, {"address": "0x123", "chain_id": "ETH"}))

    assert get_deposit_address("w1", client=client) == "0x123"


def test_get_deposit_address_other_chain(make_client):
    client = make_client(FakeResponse(200, [{"address": "bc1q"}]))

    assert get_deposit_address("w1", chain_id="BTC", client=client) == "bc1q"
    assert sent_body(client)[2] == {"chain_id": "BTC"}


def test_get_deposit_address_missing(make_client):
    assert get_deposit_address("w1", client=make_client(FakeResponse(200, []))) == ""
    assert get_deposit_address("w1", client=make_client(FakeResponse(200, [{"chain_id": "ETH"}]))) == ""


def test_withdraw_eth(make_client):
    client = make_client(FakeResponse(200, {"request_id": "r1", "status": "Submitted"}))

    result = withdraw_eth("w1", "0xdest", "0.01", client=client)

    assert result == {"request_id": "r1", "status": "Submitted"}
    assert sent_body(client) == (
        "POST",
        BASE_URL + "/v2/transactions/transfer",
        {"source_wallet_id": "w1", "token_id": "ETH", "to_address": "0xdest", "amount": "0.01"},
    )
