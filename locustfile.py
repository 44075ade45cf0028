import random

from locust import HttpUser, between, task

# Event seeded by scripts/seed_db.py (partner 1, rows A and B)
EVENT_ID = "11111111-1111-1111-1111-111111111111"
SPOT_NAMES = [f"{row}{n}" for row in "AB" for n in range(1, 11)]


class CheckoutUser(HttpUser):
    # Wait between 1 and 3 seconds between tasks
    wait_time = between(1, 3)

    @task(3)
    def browse_spots(self):
        self.client.get(f"/events/{EVENT_ID}/spots", name="/events/[id]/spots")

    @task
    def checkout(self):
        """
        Many users race for the same few spots: most requests are expected
        to end in 409, exactly one per spot in 200.
        """
        payload = {
            "event_id": EVENT_ID,
            "spots": random.sample(SPOT_NAMES, k=random.randint(1, 2)),
            "ticket_kind": random.choice(["half", "full"]),
            "email": "loadtest@example.com",
        }
        with self.client.post(
            "/checkout",
            json=payload,
            name="/checkout",  # Group all requests under this name in the stats
            catch_response=True,
        ) as response:
            if response.status_code in (200, 409):
                response.success()
