import logging
from datetime import datetime, timedelta, timezone as fixed_timezone

from fastapi import FastAPI, HTTPException, Query

from praytimes import (
    AsrFactor,
    CalculationConfig,
    ConfigurationError,
    HighLatMethod,
    Location,
    compute_times,
)

log = logging.getLogger(__name__)

app = FastAPI(
    title="Prayer Times API",
    description="API service for calculating Islamic prayer times",
    version="1.0.0"
)

ASR_METHODS = {
    "standard": AsrFactor.STANDARD,
    "shafi": AsrFactor.STANDARD,
    "hanafi": AsrFactor.HANAFI,
}


@app.get("/")
def root():
    return {
        "service": "Prayer Times API",
        "status": "online",
        "endpoints": {
            "/api/timesForGPS": "Get prayer times for GPS coordinates"
        }
    }


def get_params(calculation_method: str, asr_method: str, high_lat_method: str, dhuhr_minutes: int) -> CalculationConfig:
    try:
        asr_factor = ASR_METHODS[asr_method.lower()]
    except KeyError:
        raise ConfigurationError(f"Unknown Asr method: {asr_method!r}") from None
    try:
        method = HighLatMethod[high_lat_method.upper()]
    except KeyError:
        raise ConfigurationError(f"Unknown high latitude method: {high_lat_method!r}") from None
    return CalculationConfig(
        convention=calculation_method,
        asr_factor=asr_factor,
        dhuhr_minutes=dhuhr_minutes,
        high_lat_method=method,
    )


@app.get("/api/timesForGPS")
def get_times_for_gps(
    lat: float,
    lng: float,
    date: str,
    days: int = Query(1, ge=1, le=31),
    timezone: str | None = None,  # IANA name, e.g. "Europe/Istanbul"; wins over timezoneOffset
    timezoneOffset: int = Query(0, gt=-1440, lt=1440),  # Minutes, JavaScript getTimezoneOffset() sign, e.g. -180
    calculationMethod: str = "MWL",
    asrMethod: str = "standard",
    highLatMethod: str = "angle_based",
    dhuhrMinutes: int = 0,
):
    try:
        start_date = datetime.strptime(date, "%Y-%m-%d")
    except ValueError:
        raise HTTPException(status_code=400, detail="date must be YYYY-MM-DD")

    # getTimezoneOffset is UTC - local, so +180 is UTC-3
    tz = timezone or fixed_timezone(timedelta(minutes=-timezoneOffset))
    location = Location(lat, lng, tz)

    response_times = {}
    try:
        params = get_params(calculationMethod, asrMethod, highLatMethod, dhuhrMinutes)
        for i in range(days):
            current_day = start_date + timedelta(days=i)
            date_key = current_day.strftime("%Y-%m-%d")

            calc = compute_times(params, location, current_day.date())

            response_times[date_key] = {
                name: value.as_time().strftime("%H:%M")
                for name, value in calc.as_dict().items()
            }
    except ConfigurationError as exc:
        log.info("rejected request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))

    return {"times": response_times}
