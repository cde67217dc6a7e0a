# eatherapp

An interactive terminal client for weather forecasts from the Open-Meteo
service. You pick a kind of forecast and type a place name. The place is looked up
with the Open-Meteo geocoding API. The forecast for its coordinates is then
printed.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Usage

```
eatherapp [--base-dir DIR] [--debug]
```

- `--base-dir DIR`: the folder that holds the key files and the `db/`
  directory. By default this is the folder that holds the launched program.
- `--debug`: print the size and raw body of each forecast response.

Each forecast request also prints the URL it fetches.

The menu offers:

1. Today Simple Weather: current temperature, humidity, precipitation and
   wind speed
2. 3-Day Simple Weather: daily maximum and minimum temperature,
   precipitation sum and maximum wind speed
3. 7-Day Simple Weather
4. 7-Dat Advanced Weather: the same daily values, each day under a numbered
   heading
5. Exit

After you choose a forecast, enter a location as one word, such as `Berlin`.
If the lookup or the request fails, the error is shown and the menu comes back.
When the forecast is shown, enter `1` to go back to the menu or `2` to quit. Any
other number shows `Wrong input provided!`. The program also quits at the end
of input.

## Local data

On first start, `eatherapp` creates the SQLite database `db/eatherApp.db`
under the base directory, with a `clients` table. It also generates a random
32-byte AES key and a 16-byte IV and writes them to `prv.key` and `prv.iv` in
the base directory. If key files are already there, they are used. If the
database exists but either key file is missing, the program stops with
`Keyfile missing with existing database!!! exiting...` and exit status 1.

## What it does not do

The login and register screens exist, but the intro screen always goes
straight to the weather menu, so the running program never asks for an
account. Forecast units, time zones and other Open-Meteo options cannot be
chosen. Only the parameters listed above are requested.

## Library use

- `eatherapp.connect`
  - `Connection(debug=False, fetch=None)` has `geolocation(name)`, which
    returns a `GeoLocation(lat, lon)`, and `request(params)`, which returns the
    raw forecast body as bytes.
  - `fetch` can be any callable that takes a URL and returns bytes, which is
    useful for testing.
  - Failures raise `ConnectionError_`.
  - `geocoding_url(name)` and `build_forecast_url(params)` build the request
    URLs.
- `eatherapp.crypt`
  - `generate_key_pair()` returns a `KeyIV`.
  - `encrypt(data, kv)` and `decrypt(data, kv)` apply AES-256-GCM without
    producing or checking an authentication tag.
- `eatherapp.db`
  - `DBManager(db_name, base_dir=None)` stores clients.
  - `login(username, passwd)` returns `True` when exactly one client matches.
  - `register_user(username, passwd)` raises `DuplicateUserError` if the name
    is taken.
  - Passwords are stored as the hex of their encryption with the stored key.
- `eatherapp.cmd`
  - `CMD(starting_page, pages, db, con, stdin=None, stdout=None)` runs a list
    of `Page` objects one `step()` at a time.
  - The pages share a `Context`.
- `eatherapp.pages`
  - `build_pages()` returns the screens described above.
- `eatherapp.main`
  - `main(argv=None)` is the command's entry point.