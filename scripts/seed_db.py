import asyncio
import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from sqlalchemy import insert  # noqa: E402

from app.api.deps import engine  # noqa: E402
from app.domain.entities.event import Rating  # noqa: E402
from app.domain.entities.spot import SpotStatus  # noqa: E402
from app.infrastructure.db.tables import events, metadata, spots  # noqa: E402

DEMO_EVENTS = [
    {
        "id": "11111111-1111-1111-1111-111111111111",
        "name": "Rock in Plaza",
        "location": "Plaza Central",
        "organization": "Plaza Eventos",
        "rating": Rating.L16.value,
        "date": datetime(2027, 3, 20, 21, 0),
        "capacity": 20,
        "price": Decimal("120.00"),
        "partner_id": 1,
        "rows": "AB",
    },
    {
        "id": "22222222-2222-2222-2222-222222222222",
        "name": "Festival de Inverno",
        "location": "Parque das Flores",
        "organization": "Produções Sul",
        "rating": Rating.LIVRE.value,
        "date": datetime(2027, 7, 5, 18, 30),
        "capacity": 10,
        "price": Decimal("80.00"),
        "partner_id": 2,
        "rows": "A",
    },
]


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        print("Created missing tables.")

        for demo in DEMO_EVENTS:
            rows = demo.pop("rows")
            await conn.execute(insert(events).values(**demo))
            await conn.execute(
                insert(spots),
                [
                    {
                        "id": f"{demo['id'][:-4]}{row}{n:03d}",
                        "event_id": demo["id"],
                        "name": f"{row}{n}",
                        "status": SpotStatus.AVAILABLE.value,
                        "ticket_id": None,
                    }
                    for row in rows
                    for n in range(1, 11)
                ],
            )
            print(f"Seeded event {demo['name']} ({demo['id']}) with {len(rows) * 10} spots.")

if __name__ == "__main__":
    asyncio.run(seed())
