#!/usr/bin/env python3
"""Basic usage example"""

from log_engine import EngineBuilder, SeverityLevel


def main():
    audit = []

    # Create engine with builder pattern
    engine = (EngineBuilder()
        .with_name("example")
        .with_level(SeverityLevel.DEBUG)
        .with_console(show_time=True, show_source=True)
        .with_file("logs/example.log", level=SeverityLevel.INFO)
        .with_sink("audit", audit.append, SeverityLevel.FATAL)
        .from_env()
        .build())

    # Log messages
    engine.trace("APP", "This is trace")
    engine.debug("APP", "This is debug")
    engine.info("APP", "Application started")
    engine.warning("APP", "This is warning")
    engine.error("RADIO", "This is error")
    engine.fatal("RADIO", "This is fatal")

    # Stream-style statement
    rate = 2.4e9
    with engine.statement(SeverityLevel.INFO, "RADIO") as log:
        log << "tuned to " << rate / 1e9 << " GHz"

    # Drain and shutdown
    engine.shutdown()
    print(f"audit sink received {len(audit)} record(s)")


if __name__ == "__main__":
    main()
