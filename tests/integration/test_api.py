"""Integration tests driving a full pool lifecycle over HTTP."""

from tests.helpers import ALICE, BOB

FUNDS = "1000000"


def _onboard(client, account):
    response = client.post("/ledger/fund", json={"account": account, "native": FUNDS, "token": FUNDS})
    assert response.status_code == 200
    response = client.post("/ledger/approve", json={"owner": account, "amount": FUNDS})
    assert response.status_code == 200
    return response.json()


class TestPoolLifecycle:
    def test_full_flow(self, client):
        balance = _onboard(client, ALICE)
        assert balance == {
            "account": ALICE,
            "native": FUNDS,
            "token": FUNDS,
            "allowance": FUNDS,
        }
        _onboard(client, BOB)

        response = client.post(
            "/init", json={"caller": ALICE, "tokenAmount": "1000", "value": "1000"}
        )
        assert response.status_code == 200
        assert response.json() == {"totalShares": "1000"}

        response = client.post("/swap/native-for-token", json={"caller": BOB, "value": "100"})
        assert response.json() == {"amountOut": "90"}

        response = client.post("/deposit", json={"caller": BOB, "value": "110"})
        assert response.json() == {"tokenRequired": "92"}

        response = client.get(f"/liquidity/{BOB}")
        assert response.json() == {"account": BOB, "shares": "100"}

        pool = client.get("/pool").json()
        assert pool["nativeReserve"] == "1210"
        assert pool["tokenReserve"] == "1002"
        assert pool["totalShares"] == "1100"

        response = client.post("/withdraw", json={"caller": BOB, "shareAmount": "100"})
        assert response.json() == {"nativeAmount": "110", "tokenAmount": "91"}

        pool = client.get("/pool").json()
        assert (pool["nativeReserve"], pool["tokenReserve"], pool["totalShares"]) == (
            "1100",
            "911",
            "1000",
        )

        bob = client.get(f"/ledger/{BOB}").json()
        assert int(bob["native"]) == int(FUNDS) - 100 - 110 + 110
        assert int(bob["token"]) == int(FUNDS) + 90 - 92 + 91

    def test_events_are_published_in_order(self, client):
        _onboard(client, ALICE)
        _onboard(client, BOB)
        client.post("/init", json={"caller": ALICE, "tokenAmount": "1000", "value": "1000"})
        client.post("/swap/token-for-native", json={"caller": BOB, "tokenIn": "100"})
        # Rejected operations publish nothing
        client.post("/withdraw", json={"caller": BOB, "shareAmount": "5"})

        events = client.get("/events").json()

        assert [e["kind"] for e in events] == ["liquidity_provided", "swap_executed"]
        assert [e["sequence"] for e in events] == [1, 2]
        swap = events[1]
        assert swap["direction"] == "token_to_native"
        assert swap["input_amount"] == "100"
        assert swap["output_amount"] == "90"

    def test_price_query(self, client):
        response = client.get(
            "/price", params={"inputAmount": 100, "inputReserve": 1000, "outputReserve": 1000}
        )
        assert response.status_code == 200
        assert response.json() == {"outputAmount": "90"}

    def test_empty_pool_state(self, client, service):
        data = client.get("/pool").json()
        assert data == {
            "address": service.pool.address,
            "nativeSymbol": service.config.native_symbol,
            "tokenSymbol": service.config.token_symbol,
            "nativeReserve": "0",
            "tokenReserve": "0",
            "totalShares": "0",
        }
