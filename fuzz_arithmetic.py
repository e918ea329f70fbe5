"""Compares results with Python's eval on random inputs from the shared arithmetic subset"""
import math
import random
import re
import string
import warnings

from exprcalc import CalcError, evaluate

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return float(eval(code))
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return evaluate(code)
    except CalcError as e:
        return str(e)


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_my, str):
            continue  # chained operators are rejected here but accepted by python
        if isinstance(res_py, float) and (math.isclose(res_my, res_py) or (math.isnan(res_my) and math.isnan(res_py))):
            continue
        if isinstance(res_py, str) and ("division by zero" in res_py or "leading zeros" in res_py):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
