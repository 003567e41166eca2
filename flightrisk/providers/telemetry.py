# flightrisk/providers/telemetry.py
"""
Looks up a flight by callsign: the route (origin, destination, airline) from
adsbdb.com and the live position from adsb.lol, merged into one FlightData.

A flight is only returned when both halves are usable. Missing route info,
an empty aircraft list or a (0, 0) position all read as "not found".
"""
import logging
import time
from typing import Any, Callable, Dict, Optional

import requests

from ..constants.providers import ProviderConstants
from ..constants.risk import UnitConversions
from ..geo.data_models import GeoPoint
from ..tracking.data_models import AirportInfo, FlightData, FlightKinematics
from .exceptions import TelemetryError
from .session import build_session

logger = logging.getLogger(__name__)


def normalize_callsign(callsign: str) -> str:
    return callsign.strip().upper()


def _number(value: Any, default: float = 0.0) -> float:
    # adsb.lol reports alt_baro as the string "ground" for aircraft on the ground
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value)


class AdsbTelemetryProvider:
    """Telemetry adapter returning FlightData, or None when the flight cannot be found."""

    def __init__(self, timeout: int = ProviderConstants.REQUEST_TIMEOUT_SEC,
                 cache_enabled: bool = True,
                 route_session: Optional[requests.Session] = None,
                 live_session: Optional[requests.Session] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.timeout = timeout
        # Routes change rarely and are cached; live positions never are.
        self.route_session = route_session or build_session(
            ProviderConstants.ROUTE_CACHE_NAME,
            ProviderConstants.ROUTE_CACHE_EXPIRY_SEC,
            cache_enabled,
        )
        self.live_session = live_session or requests.Session()
        self._sleep = sleep
        logger.info("AdsbTelemetryProvider initialized.")

    def get_flight(self, callsign: str) -> Optional[FlightData]:
        normalized = normalize_callsign(callsign)
        if not normalized:
            return None
        try:
            route_data = self._fetch_route(normalized)
            live_data = self._fetch_live(normalized)
        except TelemetryError as e:
            logger.error(f"Flight fetch error for {normalized}: {e}")
            return None
        return self._merge(route_data, live_data, normalized)

    def _fetch_route(self, callsign: str) -> Dict[str, Any]:
        url = ProviderConstants.ADSBDB_CALLSIGN_URL.format(callsign=callsign)
        try:
            response = self.route_session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TelemetryError(f"adsbdb request failed: {e}") from e
        if not response.ok:
            raise TelemetryError(f"adsbdb API error: {response.status_code}", response.status_code)
        return self._json(response)

    def _fetch_live(self, callsign: str) -> Dict[str, Any]:
        url = ProviderConstants.ADSB_LOL_CALLSIGN_URL.format(callsign=callsign)
        limit = ProviderConstants.LIVE_RETRY_LIMIT
        for attempt in range(limit + 1):
            try:
                response = self.live_session.get(url, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                if attempt < limit:
                    logger.warning(f"Retrying live lookup for {callsign}... attempt {attempt + 1}")
                    self._sleep(ProviderConstants.LIVE_RETRY_DELAY_SEC)
                    continue
                raise TelemetryError(f"adsb.lol request failed: {e}") from e

            if response.status_code == 429 and attempt < limit:
                logger.warning(f"Rate limit hit. Retrying... ({attempt + 1})")
                self._sleep(ProviderConstants.LIVE_RETRY_DELAY_SEC)
                continue
            if not response.ok:
                raise TelemetryError(f"adsb.lol API error: {response.status_code}", response.status_code)
            return self._json(response)
        raise TelemetryError("adsb.lol retries exhausted")

    @staticmethod
    def _json(response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise TelemetryError(f"invalid JSON: {e}") from e
        return data if isinstance(data, dict) else {}

    def _merge(self, route_data: Dict[str, Any], live_data: Dict[str, Any], callsign: str) -> Optional[FlightData]:
        response = route_data.get('response')
        # adsbdb answers an unknown callsign with a plain string
        route = response.get('flightroute') if isinstance(response, dict) else None
        if not isinstance(route, dict) or not all(
                isinstance(route.get(key), dict) for key in ('origin', 'destination', 'airline')):
            logger.warning(f"Incomplete route data for {callsign}")
            return None

        aircraft_list = live_data.get('ac')
        if not isinstance(aircraft_list, list) or not aircraft_list:
            logger.warning(f"No live aircraft data found for {callsign}")
            return None

        aircraft = aircraft_list[0]
        if not isinstance(aircraft, dict):
            logger.warning(f"Unusable live aircraft record for {callsign}")
            return None
        lat = _number(aircraft.get('lat'))
        lon = _number(aircraft.get('lon'))
        if lat == 0 and lon == 0:
            logger.warning(f"Invalid aircraft position [0,0] for {callsign}")
            return None

        try:
            origin = self._airport(route['origin'])
            destination = self._airport(route['destination'])
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Unusable airport record for {callsign}: {e}")
            return None

        airline = route['airline']
        kinematics = FlightKinematics(
            position=GeoPoint(lat=lat, lon=lon),
            heading_deg=_number(aircraft.get('track')),
            speed_mph=_number(aircraft.get('gs')) * UnitConversions.MPH_PER_KNOT,
            altitude_ft=_number(aircraft.get('alt_baro')),
        )
        return FlightData(
            callsign=callsign,
            kinematics=kinematics,
            origin=origin,
            destination=destination,
            airline={
                'name': airline.get('name'),
                'code': airline.get('iata'),
                'callsign': airline.get('callsign'),
            },
            aircraft_type=aircraft.get('t') or 'Unknown',
            status='En Route' if aircraft.get('hex') else 'Unknown',
        )

    @staticmethod
    def _airport(record: Dict[str, Any]) -> AirportInfo:
        return AirportInfo(
            code=record.get('iata_code') or record.get('icao_code') or '',
            name=record.get('name', ''),
            city=record.get('municipality', ''),
            country=record.get('country_name', ''),
            position=GeoPoint(lat=float(record['latitude']), lon=float(record['longitude'])),
        )
