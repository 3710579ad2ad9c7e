"""Report system CPU, memory and network metrics to Telegraf.

Run with:
    TELEGRAF_URL=udp://localhost:8094 python examples/system_metrics.py

Requires the ``examples`` extra (psutil).
"""

import logging
import socket
import time

import psutil

from telegrafpy import Client, UnsignedInteger, field, metric, now_ns, point, tag, timestamp

logger = logging.getLogger(__name__)

HOST = socket.gethostname()


@metric(measurement="system_memory")
class Memory:
    host: str = tag()
    percent: float = 0.0
    used: int = field(unsigned=True, default=0)
    available: int = field(unsigned=True, default=0)
    total: int = field(unsigned=True, default=0)
    ts: int | None = timestamp(default=None)


def collect_system_metrics(client: Client) -> None:
    """Write one round of system metrics."""
    now = now_ns()

    # CPU metrics
    per_cpu = psutil.cpu_percent(interval=None, percpu=True)
    points = [
        point("system_cpu", {"percent": psutil.cpu_percent(interval=None)}, {"host": HOST}, now)
    ]
    points.extend(
        point("system_cpu", {"percent": pct}, {"host": HOST, "core": str(i)}, now)
        for i, pct in enumerate(per_cpu)
    )

    # Network I/O
    net_io = psutil.net_io_counters()
    points.append(
        point(
            "system_network",
            {
                "bytes_sent": UnsignedInteger(net_io.bytes_sent),
                "bytes_recv": UnsignedInteger(net_io.bytes_recv),
            },
            {"host": HOST},
            now,
        )
    )
    client.write_points(points)

    mem = psutil.virtual_memory()
    client.write(
        Memory(
            host=HOST,
            percent=mem.percent,
            used=mem.used,
            available=mem.available,
            total=mem.total,
            ts=now,
        )
    )


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    with Client.from_env() as client:
        while True:
            try:
                collect_system_metrics(client)
            except OSError as e:
                logger.warning("Write failed: %s", e)
            time.sleep(10)


if __name__ == "__main__":
    main()
