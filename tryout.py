from exprcalc import CalcError, Session, parse, scan, unscan

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "80225/-2",
    "7/(6/2000)",
    "5^2",
    "-2^2",
    "2^-1",
    "7 % -3",
    "sqrt(16) + pow(2, 3,)",
    "log(8, 2)",
    "round(-2.5)",
    "tau - 2 * pi",
    "1 / 0",
    "$0 * 2",
    "$ans + phi",
    "1 + 2 + 3",
    "log2 8",
    "$",
]:
    session = Session()
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = scan(code)
        print(f"tokens: {' '.join(str(t) for t in tokens)}")
        print(f"rendered: {unscan(tokens)}")
        print(f"ast: {parse(tokens)}")
        session.evaluate("1 + 2")
        print(f"result: {session.evaluate(code)}")
    except CalcError as e:
        print(e)
    print(f"variables: {dict(session.variables)}")
