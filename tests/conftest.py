import pytest

from forklisp.interpreter import Interpreter

# Tests that take the `interp` fixture run twice:
# 1) with sequential argument evaluation ["sequential"]
# 2) with fork-join argument evaluation on a worker pool ["parallel"]
# Both modes must produce identical results for print-free programs.


@pytest.fixture(params=["sequential", "parallel"])
def eval_mode(request):
    return request.param


@pytest.fixture
def interp(eval_mode):
    with Interpreter(parallel=(eval_mode == "parallel"), max_workers=8) as itp:
        yield itp
