"""GraphQL queries for Light Service"""

from typing import Optional
import strawberry

from light_service.schema.types import Light


@strawberry.type
class Query:
    """Light service queries"""

    @strawberry.field(description="Get the light")
    async def light(self, info: strawberry.Info) -> Optional[Light]:
        """Current state of the light"""
        service = info.context["light_service"]
        light_data = await service.get_light()
        return Light.from_model(light_data)
