import pytest


@pytest.fixture
def daily_payload():
    return {
        "Meta Data": {
            "1. Information": "Daily Prices",
            "2. Symbol": "MSFT",
            "3. Last Refreshed": "2023-09-08",
            "4. Interval": "Daily",
            "5. Output Size": "Compact",
            "6. Time Zone": "US/Eastern",
        },
        "Time Series (Daily)": {
            "2023-09-08": {
                "1. open": "330.00",
                "2. high": "335.00",
                "3. low": "329.00",
                "4. close": "334.00",
                "5. volume": "1000000",
            },
        },
    }


@pytest.fixture
def intraday_payload():
    return {
        "Meta Data": {
            "1. Information": "Intraday (5min) open, high, low, close prices and volume",
            "2. Symbol": "IBM",
            "3. Last Refreshed": "2023-09-08 19:55:00",
            "4. Interval": "5min",
            "5. Output Size": "Compact",
            "6. Time Zone": "US/Eastern",
        },
        "Time Series (5min)": {
            "2023-09-08 19:55:00": {
                "1. open": "147.6500",
                "2. high": "147.6500",
                "3. low": "147.6500",
                "4. close": "147.6500",
                "5. volume": "10",
            },
            "2023-09-08 19:45:00": {
                "1. open": "147.5000",
                "2. high": "147.7000",
                "3. low": "147.5000",
                "4. close": "147.6000",
                "5. volume": "250",
            },
            "2023-09-08 19:50:00": {
                "1. open": "147.6000",
                "2. high": "147.6500",
                "3. low": "147.5500",
                "4. close": "147.6500",
                "5. volume": "120",
            },
        },
    }


@pytest.fixture
def weekly_adjusted_payload():
    return {
        "Meta Data": {
            "1. Information": "Weekly Adjusted Prices and Volumes",
            "2. Symbol": "IBM",
            "3. Last Refreshed": "2023-09-08",
            "4. Time Zone": "US/Eastern",
        },
        "Weekly Adjusted Time Series": {
            "2023-09-08": {
                "1. open": "147.2600",
                "2. high": "148.1000",
                "3. low": "145.9200",
                "4. close": "147.6800",
                "5. adjusted close": "147.6800",
                "6. volume": "13245651",
                "7. dividend amount": "0.0000",
            },
            "2023-08-10": {
                "1. open": "143.0000",
                "2. high": "146.0000",
                "3. low": "142.5000",
                "4. close": "145.0000",
                "5. adjusted close": "143.3500",
                "6. volume": "20311112",
                "7. dividend amount": "1.6600",
            },
        },
    }


@pytest.fixture
def quote_payload():
    return {
        "Global Quote": {
            "01. symbol": "IBM",
            "02. open": "147.2600",
            "03. high": "148.1000",
            "04. low": "146.8200",
            "05. price": "147.6800",
            "06. volume": "2645651",
            "07. latest trading day": "2023-09-08",
            "08. previous close": "147.0000",
            "09. change": "0.6800",
            "10. change percent": "0.4626%",
        }
    }


@pytest.fixture
def sma_payload():
    return {
        "Meta Data": {
            "1: Symbol": "IBM",
            "2: Indicator": "Simple Moving Average (SMA)",
            "3: Last Refreshed": "2023-09-08 19:00:00",
            "4: Interval": "60min",
            "5: Time Period": 10,
            "6: Series Type": "close",
            "7: Time Zone": "US/Eastern",
        },
        "Technical Analysis: SMA": {
            "2023-09-08 19:00": {"SMA": "147.5270"},
            "2023-09-08 17:00": {"SMA": "147.3150"},
            "2023-09-08 18:00": {"SMA": "147.4410"},
        },
    }


@pytest.fixture
def bbands_payload():
    return {
        "Meta Data": {
            "1: Symbol": "IBM",
            "2: Indicator": "Bollinger Bands (BBANDS)",
            "3: Last Refreshed": "2023-09-08 19:00:00",
            "4: Interval": "60min",
            "5: Time Period": 20,
            "6.1: Deviation multiplier for upper band": 2,
            "6.2: Deviation multiplier for lower band": 2,
            "6.3: MA Type": 0,
            "7: Series Type": "close",
            "8: Time Zone": "US/Eastern Time",
        },
        "Technical Analysis: BBANDS": {
            "2023-09-08 19:00": {
                "Real Upper Band": "148.1930",
                "Real Middle Band": "147.4810",
                "Real Lower Band": "146.7690",
            },
            "2023-09-08 18:00": {
                "Real Upper Band": "148.0510",
                "Real Middle Band": "147.3990",
                "Real Lower Band": "146.7470",
            },
        },
    }


@pytest.fixture
def crypto_payload():
    return {
        "Meta Data": {
            "1. Information": "Daily Prices and Volumes for Digital Currency",
            "2. Digital Currency Code": "BTC",
            "3. Digital Currency Name": "Bitcoin",
            "4. Market Code": "USD",
            "5. Market Name": "United States Dollar",
            "6. Last Refreshed": "2023-09-08 00:00:00",
            "7. Time Zone": "UTC",
        },
        "Time Series (Digital Currency Daily)": {
            "2023-09-08": {
                "1a. open (USD)": "26240.01",
                "2a. high (USD)": "26444.00",
                "3a. low (USD)": "25610.00",
                "4a. close (USD)": "25905.98",
                "5. volume": "34181.52",
                "6. market cap (USD)": "34181.52",
            },
            "2023-09-07": {
                "1a. open (USD)": "25750.00",
                "2a. high (USD)": "26444.00",
                "3a. low (USD)": "25611.00",
                "4a. close (USD)": "26240.00",
                "5. volume": "29217.41",
                "6. market cap (USD)": "29217.41",
            },
        },
    }


@pytest.fixture
def exchange_rate_payload():
    return {
        "Realtime Currency Exchange Rate": {
            "1. From_Currency Code": "USD",
            "2. From_Currency Name": "United States Dollar",
            "3. To_Currency Code": "JPY",
            "4. To_Currency Name": "Japanese Yen",
            "5. Exchange Rate": "147.82400000",
            "6. Last Refreshed": "2023-09-08 21:59:01",
            "7. Time Zone": "UTC",
            "8. Bid Price": "147.81980000",
            "9. Ask Price": "147.82830000",
        }
    }
