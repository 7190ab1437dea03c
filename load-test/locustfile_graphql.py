"""
Locust load test for the Light Service GraphQL API

Read-heavy mix of the light query and the turn on/off mutation.
Run with: locust -f locustfile_graphql.py --host=http://localhost:4000
"""

from locust import HttpUser, task, between
import random


LIGHT_QUERY = """
query GetLight {
    light {
        id
        name
        on
        brightness
        color {
            hue
            saturation
            lightness
        }
    }
}
"""

TURN_ON_OFF_MUTATION = """
mutation TurnOnOffLight($on: Boolean!) {
    turnOnOffLight(on: $on) {
        __typename
        ... on TurnOnOffLightSuccess {
            light {
                id
                on
            }
        }
        ... on LightUnavailable {
            message
        }
    }
}
"""


class GraphQLUser(HttpUser):
    """Load test user for the light GraphQL API"""

    wait_time = between(0.1, 0.5)  # Wait 0.1-0.5s between requests
    host = "http://localhost:4000"

    # ============== API-1: Read the light ==============

    @task(3)
    def get_light(self):
        """
        Scenario 1: Full light read including nested color
        """
        self.client.post("/graphql", json={"query": LIGHT_QUERY}, name="API-1: Get light")

    # ============== API-2: Turn the light on/off ==============

    @task(1)
    def turn_on_off_light(self):
        """
        Scenario 2: Mutation with union result

        An unavailable light is a normal response, so only transport or
        GraphQL errors count as failures.
        """
        with self.client.post(
            "/graphql",
            json={"query": TURN_ON_OFF_MUTATION, "variables": {"on": random.random() < 0.5}},
            name="API-2: Turn light on/off",
            catch_response=True,
        ) as response:
            body = response.json()
            if body.get("errors"):
                response.failure(f"GraphQL errors: {body['errors']}")
            else:
                response.success()
