import pytest

EXPECTED_HEADERS = [
    {
        "orderId": 1,
        "name": "userA",
        "orderStatus": "ORDER",
        "address": {"city": "서울", "street": "1", "zipcode": "1111"},
    },
    {
        "orderId": 2,
        "name": "userB",
        "orderStatus": "ORDER",
        "address": {"city": "진주", "street": "2", "zipcode": "2222"},
    },
]


def _without_dates(rows):
    return [{key: value for key, value in row.items() if key != "orderDate"} for row in rows]


def test_simple_orders_v1_exposes_order_entities(client, seeded):
    response = client.get("/api/v1/simple-orders")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 2
    assert set(body[0]) == {"id", "member", "delivery", "orderDate", "status"}
    assert body[0]["member"]["name"] == "userA"
    assert body[0]["delivery"]["status"] == "READY"
    assert body[1]["delivery"]["address"] == {"city": "진주", "street": "2", "zipcode": "2222"}


@pytest.mark.parametrize("version", ["v2", "v3", "v4"])
def test_simple_orders_dto_versions_share_one_shape(client, seeded, version):
    response = client.get(f"/api/{version}/simple-orders")

    assert response.status_code == 200
    assert _without_dates(response.json()) == EXPECTED_HEADERS


def test_simple_orders_versions_return_identical_payloads(client, seeded):
    v2 = client.get("/api/v2/simple-orders").json()

    assert client.get("/api/v3/simple-orders").json() == v2
    assert client.get("/api/v4/simple-orders").json() == v2


def test_simple_orders_v2_loads_relations_one_query_at_a_time(client, seeded, count_selects):
    with count_selects() as counter:
        client.get("/api/v2/simple-orders")

    # orders, then member and delivery for each of the two orders
    assert counter.count == 5


@pytest.mark.parametrize("version", ["v3", "v4"])
def test_simple_orders_fetch_join_and_dto_query_use_one_select(client, seeded, count_selects, version):
    with count_selects() as counter:
        client.get(f"/api/{version}/simple-orders")

    assert counter.count == 1
