"""Derive points from a dataclass and print their line protocol.

Run with:
    python examples/derive_example.py
"""

from telegrafpy import field, metric, tag


@metric
class Http:
    # Time in microseconds
    latency: int = field(unsigned=True)
    # API method name (e.g. "users")
    method: str = tag()
    http_status: int = tag()


if __name__ == "__main__":
    p = Http(latency=123, method="users", http_status=200).to_point()
    assert str(p) == "Http,http_status=200,method=users latency=123u\n"
    print(p, end="")
