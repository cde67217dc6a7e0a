"""The screens of the weather client: menus, prompts and forecast views."""

from __future__ import annotations

import json
from typing import Any, Optional, TextIO

from .cmd import Context, Page
from .connect import ConnectionError_
from .db import DuplicateUserError

INTRO_PAGE = 0
LOGIN_PAGE = 1
REGISTER_PAGE = 2
MENU_PAGE = 3
CURRENT_PAGE = 4
THREE_DAY_PAGE = 5
SEVEN_DAY_PAGE = 6
SEVEN_DAY_ADVANCED_PAGE = 7

WRONG_INPUT = "Wrong input provided!"
AUTH_FAILED = "something went wrong!"

_CURRENT = "current=relative_humidity_2m,temperature_2m,precipitation,wind_speed_10m"
_DAILY = "daily=temperature_2m_max,temperature_2m_min,precipitation_sum,wind_speed_10m_max"

# Menu choice -> (extra forecast parameters, page that shows the result).
_FORECASTS = {
    1: ((_CURRENT,), CURRENT_PAGE),
    2: ((_DAILY, "forecast_days=3"), THREE_DAY_PAGE),
    3: ((_DAILY, "forecast_days=7"), SEVEN_DAY_PAGE),
    4: ((_DAILY, "forecast_days=7"), SEVEN_DAY_ADVANCED_PAGE),
}
_MENU_EXIT = 5

_WEATHER_MENU = 1
_WEATHER_EXIT = 2


def _read_token(stream: TextIO) -> Optional[str]:
    """Read one whitespace-delimited word; None at end of input."""
    chars: list[str] = []
    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch.isspace():
            if chars:
                break
            continue
        chars.append(ch)
    return "".join(chars) or None


def _read_choice(stream: TextIO) -> Optional[int]:
    """Read a numeric choice; 0 if the word is not a number, None at end of input."""
    token = _read_token(stream)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return 0


def _get(data: Any, *keys: Any) -> Any:
    for key in keys:
        if isinstance(data, dict):
            data = data.get(key)
        elif isinstance(data, list) and isinstance(key, int) and 0 <= key < len(data):
            data = data[key]
        else:
            return None
    return data


def _show(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def draw_intro(data: dict, out: TextIO) -> None:
    """Show the login/register/exit choices."""
    out.write("1. Login\n2. Register\n3. Exit\n\n")


def input_intro(ctx: Context) -> bool:
    """Skip straight to the weather menu; accounts are not required."""
    ctx.page = MENU_PAGE
    return True


def draw_empty(data: dict, out: TextIO) -> None:
    """Draw nothing; the page prompts from its input handler."""


def _read_credentials(ctx: Context, title: str) -> Optional[tuple[str, str]]:
    out = ctx.stdout
    out.write(f"\n{title}\n\nusername: ")
    username = _read_token(ctx.stdin)
    if username is None:
        return None
    out.write("\npasswd: ")
    passwd = _read_token(ctx.stdin)
    if passwd is None:
        return None
    return username, passwd


def input_login(ctx: Context) -> bool:
    """Ask for credentials and log in; back to the intro on failure."""
    credentials = _read_credentials(ctx, "LOGIN")
    if credentials is None:
        return False
    if ctx.db.login(*credentials):
        ctx.page = MENU_PAGE
        ctx.error = ""
    else:
        ctx.error = AUTH_FAILED
        ctx.page = INTRO_PAGE
    return True


def input_register(ctx: Context) -> bool:
    """Ask for credentials and register; back to the intro on failure."""
    credentials = _read_credentials(ctx, "REGISTER")
    if credentials is None:
        return False
    try:
        ctx.db.register_user(*credentials)
    except DuplicateUserError:
        ctx.error = AUTH_FAILED
        ctx.page = INTRO_PAGE
    else:
        ctx.page = MENU_PAGE
        ctx.error = ""
    return True


def draw_menu(data: dict, out: TextIO) -> None:
    """Show the forecast choices."""
    out.write(
        "1. Today Simple Weather\n2. 3-Day Simple Weather\n3. 7-Day Simple Weather\n"
        "4. 7-Dat Advanced Weather\n5. Exit\n\n"
    )


def input_menu(ctx: Context) -> bool:
    """Read a forecast choice and a location, then fetch and show the forecast."""
    ctx.stdout.write(": ")
    choice = _read_choice(ctx.stdin)
    if choice is None or choice == _MENU_EXIT:
        return False
    if choice not in _FORECASTS:
        ctx.error = WRONG_INPUT
        return True
    extra, target = _FORECASTS[choice]

    ctx.stdout.write("\nLocation: ")
    location = _read_token(ctx.stdin)
    if location is None:
        return False
    try:
        geo = ctx.con.geolocation(location)
        params = [f"latitude={geo.lat:.6f}", f"longitude={geo.lon:.6f}", *extra]
        ctx.last_data = json.loads(ctx.con.request(params))
    except (ConnectionError_, ValueError) as exc:
        ctx.error = str(exc)
        return True
    ctx.error = ""
    ctx.page = target
    return True


def _draw_position(data: dict, out: TextIO) -> None:
    out.write(f"\nlatitude: {_show(_get(data, 'latitude'))}")
    out.write(f"\nlongitude: {_show(_get(data, 'longitude'))}")


def _draw_day(data: dict, out: TextIO, day: int) -> None:
    def daily(key: str) -> str:
        return _show(_get(data, "daily", key, day))

    out.write(f"\ntemperature (max): {daily('temperature_2m_max')}C")
    out.write(f"\ntemperature (min): {daily('temperature_2m_min')}C")
    out.write(f"\nprecipitation: {daily('precipitation_sum')}mm")
    out.write(f"\nwind speed: {daily('wind_speed_10m_max')}km/h")


def draw_current(data: dict, out: TextIO) -> None:
    """Show today's current conditions."""
    _draw_position(data, out)
    out.write(f"\ntemperature: {_show(_get(data, 'current', 'temperature_2m'))}C")
    out.write(f"\nhumidity: {_show(_get(data, 'current', 'relative_humidity_2m'))}%")
    out.write(f"\nprecipitation: {_show(_get(data, 'current', 'precipitation'))}mm")
    out.write(f"\nwind speed: {_show(_get(data, 'current', 'wind_speed_10m'))}km/h")
    out.write("\n\n1. Menu")
    out.write("\n2. Exit\n\n")


def draw_three_day(data: dict, out: TextIO) -> None:
    """Show a three-day daily forecast."""
    _draw_position(data, out)
    for day in range(3):
        out.write("\nDAY 1")
        _draw_day(data, out, day)
    out.write("\n\n1. Menu")
    out.write("\n2. Exit")
    out.write("\n2. Exit\n\n")


def draw_seven_day(data: dict, out: TextIO) -> None:
    """Show a seven-day daily forecast."""
    _draw_position(data, out)
    for day in range(7):
        out.write("\nDAY 1")
        _draw_day(data, out, day)
    out.write("\n\n1. Menu")
    out.write("\n2. Exit\n\n")


def draw_seven_day_advanced(data: dict, out: TextIO) -> None:
    """Show a seven-day daily forecast with numbered day headers."""
    _draw_position(data, out)
    for day in range(7):
        out.write(f"\n\n  -- DAY {day} --  ")
        _draw_day(data, out, day)
    out.write("\n\n1. Menu")
    out.write("\n2. Exit\n\n")


def input_weather(ctx: Context) -> bool:
    """Go back to the menu or quit after a forecast has been shown."""
    ctx.stdout.write(": ")
    choice = _read_choice(ctx.stdin)
    if choice is None or choice == _WEATHER_EXIT:
        ctx.error = ""
        return False
    if choice == _WEATHER_MENU:
        ctx.error = ""
        ctx.page = MENU_PAGE
    else:
        ctx.error = WRONG_INPUT
    return True


def build_pages() -> list[Page]:
    """Return every screen in the order the page numbers refer to."""
    return [
        Page(1, draw_intro, input_intro),
        Page(2, draw_empty, input_login),
        Page(3, draw_empty, input_register),
        Page(4, draw_menu, input_menu),
        Page(5, draw_current, input_weather),
        Page(6, draw_three_day, input_weather),
        Page(7, draw_seven_day, input_weather),
        Page(8, draw_seven_day_advanced, input_weather),
    ]