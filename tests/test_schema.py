import pytest

from light_service.models.light import LightModel
from light_service.models.result import LightUnavailable, TurnOnOffSuccess
from light_service.schema import schema
from light_service.schema.types import (
    ResultResolutionError,
    resolve_result_type,
    to_graphql_result,
    TurnOnOffLightSuccess,
)

from conftest import INITIAL_LIGHT, run


LIGHT_QUERY = """
query {
    light {
        id
        name
        on
        brightness
        color { hue saturation lightness }
    }
}
"""

TURN_ON_OFF_MUTATION = """
mutation TurnOnOff($on: Boolean!) {
    turnOnOffLight(on: $on) {
        __typename
        ... on TurnOnOffLightSuccess { light { id on } }
        ... on LightUnavailable { message }
    }
}
"""


def execute(service, query, variables=None):
    return run(schema.execute(
        query,
        variable_values=variables,
        context_value={"light_service": service},
    ))


def test_sdl_shape():
    sdl = schema.as_str()
    assert "union TurnOnOffLightResult = TurnOnOffLightSuccess | LightUnavailable" in sdl
    assert "turnOnOffLight(on: Boolean!): TurnOnOffLightResult!" in sdl
    assert "light: Light" in sdl


def test_light_query(available_service):
    result = execute(available_service, LIGHT_QUERY)
    assert result.errors is None
    assert result.data["light"] == INITIAL_LIGHT


def test_mutation_success_then_query(available_service):
    result = execute(available_service, TURN_ON_OFF_MUTATION, {"on": False})
    assert result.errors is None
    assert result.data["turnOnOffLight"] == {
        "__typename": "TurnOnOffLightSuccess",
        "light": {"id": INITIAL_LIGHT["id"], "on": False},
    }

    assert execute(available_service, LIGHT_QUERY).data["light"]["on"] is False


def test_mutation_unavailable_then_query(unavailable_service):
    result = execute(unavailable_service, TURN_ON_OFF_MUTATION, {"on": False})
    assert result.errors is None
    assert result.data["turnOnOffLight"] == {
        "__typename": "LightUnavailable",
        "message": "Reading Lamp is currently unavailable",
    }

    assert execute(unavailable_service, LIGHT_QUERY).data["light"]["on"] is True


def test_mutation_requires_on(available_service):
    result = execute(available_service, "mutation { turnOnOffLight { __typename } }")
    assert result.errors
    assert available_service.repository.peek().on is True


class BrokenService:
    async def turn_on_off(self, on):
        return {"kind": "exploded"}


def test_unresolvable_outcome_is_a_graphql_error():
    result = execute(BrokenService(), TURN_ON_OFF_MUTATION, {"on": True})
    assert result.data is None
    assert len(result.errors) == 1
    assert "Invalid turn on/off result" in result.errors[0].message


def test_resolve_domain_outcomes():
    light = LightModel(**INITIAL_LIGHT)
    assert resolve_result_type(TurnOnOffSuccess(light=light)) == "TurnOnOffLightSuccess"
    assert resolve_result_type(LightUnavailable(message="gone")) == "LightUnavailable"


def test_resolve_tagged_mappings():
    assert resolve_result_type({"kind": "success", "light": INITIAL_LIGHT}) == "TurnOnOffLightSuccess"
    assert resolve_result_type({"kind": "unavailable", "message": "gone"}) == "LightUnavailable"


def test_resolve_untagged_mappings_by_populated_field():
    assert resolve_result_type({"light": INITIAL_LIGHT}) == "TurnOnOffLightSuccess"
    assert resolve_result_type({"light": None, "message": "gone"}) == "LightUnavailable"
    # light wins when both are populated
    assert resolve_result_type({"light": INITIAL_LIGHT, "message": "gone"}) == "TurnOnOffLightSuccess"


@pytest.mark.parametrize("value", [
    {},
    {"light": None, "message": ""},
    {"kind": "success"},
    {"kind": "unavailable", "message": ""},
    None,
    "TurnOnOffLightSuccess",
])
def test_resolve_rejects_neither(value):
    with pytest.raises(ResultResolutionError):
        resolve_result_type(value)


def test_to_graphql_result_from_mapping():
    result = to_graphql_result({"light": INITIAL_LIGHT})
    assert isinstance(result, TurnOnOffLightSuccess)
    assert result.light.name == "Reading Lamp"
    assert result.light.color.hue == 67
