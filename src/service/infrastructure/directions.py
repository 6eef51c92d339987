import math
from typing import Any, Dict, Optional

from .forwarder import HttpForwarder
from ...common.exceptions import ConfigurationError, InvalidInputError, RouteNotFoundError, UpstreamError
from ...common.schemas import DirectionsResponse

class GoogleDirectionsClient:
    """
    Looks up a route with the Google Directions API and reshapes the first
    leg into travel time (minutes) and length (kilometers).
    """
    def __init__(self, forwarder: HttpForwarder, api_key: Optional[str], base_url: str):
        self.forwarder = forwarder
        self.api_key = api_key
        self.base_url = base_url

    async def lookup(self, origin: Optional[str], destination: Optional[str]) -> DirectionsResponse:
        if not self.api_key:
            raise ConfigurationError("GOOGLE_MAPS_API_KEY not set.")
        if not origin or not destination:
            raise InvalidInputError("origin & destination required")

        payload = await self.forwarder.fetch_json(self.base_url, params={
            "origin": origin,
            "destination": destination,
            "departure_time": "now",
            "key": self.api_key,
        })
        return self.reshape(payload)

    @staticmethod
    def first_leg(payload: Any) -> Optional[Dict[str, Any]]:
        try:
            leg = payload["routes"][0]["legs"][0]
        except (KeyError, IndexError, TypeError):
            return None
        return leg if isinstance(leg, dict) and leg else None

    @classmethod
    def reshape(cls, payload: Any) -> DirectionsResponse:
        leg = cls.first_leg(payload)
        if leg is None:
            raise RouteNotFoundError("No route found")

        try:
            # Prefer the traffic-aware duration when the provider returns it
            in_traffic = leg.get("duration_in_traffic")
            t_sec = in_traffic.get("value") if isinstance(in_traffic, dict) else None
            if t_sec is None:
                t_sec = leg["duration"]["value"]
            t_sec = float(t_sec)
            l_m = float(leg["distance"]["value"])
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamError(f"Malformed route leg: {e}") from e

        return DirectionsResponse(
            # Half minutes round up
            T_min=math.floor(t_sec / 60 + 0.5),
            L_km=round(l_m / 1000, 2),
            raw=payload,
        )
