import logging
import os

from exprcalc import CalcError, Session

logging.basicConfig(
    level=os.environ.get("EXPRCALC_LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)


if __name__ == "__main__":
    session = Session()

    while True:
        try:
            code = input("> ")
        except EOFError:
            break

        if code.strip() == "reset":
            session.reset()
            continue
        if not code.strip():
            continue

        try:
            name, value = session.evaluate(code)
        except CalcError as e:
            print(e)
            continue

        print(f"{name} = {value}")
