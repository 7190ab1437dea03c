"""GraphQL mutations for Light Service"""

import strawberry

from light_service.schema.types import TurnOnOffLightResult, to_graphql_result


@strawberry.type
class Mutation:
    """Light service mutations"""

    @strawberry.mutation(description="Turn the light on or off")
    async def turn_on_off_light(
        self,
        on: bool,
        info: strawberry.Info
    ) -> TurnOnOffLightResult:
        """
        Turn the light on or off

        Args:
            on: Requested power state

        Returns:
            TurnOnOffLightSuccess with the updated light, or LightUnavailable
            when the light can't be reached
        """
        service = info.context["light_service"]
        outcome = await service.turn_on_off(on)
        return to_graphql_result(outcome)
