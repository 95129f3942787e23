"""Pedersen group parameters: the {p, g, h} triple and how it is produced.

Generation asks a safe-prime source for p (in a worker thread, so an event
loop keeps running while the search is in progress), then samples g and h
independently from the secure random source. h is never derived from g.
"""

from __future__ import annotations

import asyncio
import functools
import logging
import threading
from dataclasses import dataclass

from pedersen.config import SETTINGS
from pedersen.crypto.modmath import mod_exp
from pedersen.crypto.primes import SafePrimeSource, generate_safe_prime, is_safe_prime
from pedersen.crypto.randomness import RandomSource, random_in_range, resolve
from pedersen.errors import InvalidInput, PrimeGenerationFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Parameters:
    p: int
    g: int
    h: int

    @property
    def q(self) -> int:
        return (self.p - 1) // 2

    @property
    def bit_length(self) -> int:
        return self.p.bit_length()


# 2048-bit parameter set shared read-only by every caller that does not
# generate its own.
DEFAULT_PARAMETERS = Parameters(
    p=int(
        "268099315097137268819293939347461944943986233402546032673447094190723156"
        "019429966795555400942167563555872366782337145405697022094305239896686950"
        "218132966044378903183043597889977563144859458592691258434797374624436044"
        "632187883819023993008554493990510373963229528862671851092583595510318521"
        "929267514027396266028765088690211214158399404130961111043575466780957811"
        "750091539554980751940188587653878277429799587353491186532469176042446246"
        "115254798548156349832024660181800045757135195215916961367082408119911825"
        "164645146229759805288617235815132419046172489962583833056590587674751001"
        "10699861201638082703862378707771683885043"
    ),
    g=int(
        "146947090483664791294640272216545521622315853414329319623773189999420259"
        "348470162871138438450826104383426488645962042922113527777890375546663730"
        "365834655559917253791958178809606453052373259525221049830342001483070245"
        "464288776579762879303461885127205970941422042474642932507612455191197792"
        "617239632734111468827440828305844120931291941187968792847561922003916454"
        "236850549397361403018813957571725707442186232866228344331541493499154325"
        "475999009239091647113294737956898634776894857644915262003091442964523101"
        "570087626642816053419104711904815591990028692956688437365669240267267136"
        "87853270832401989537050128451073524103513"
    ),
    h=int(
        "177656575964899915206757142632379012962930340561241640286330043896753322"
        "099961543540747696307868775252260098001622721896816691771698779714815952"
        "216795934102708886548168219658255941287681849927848427967174655614685542"
        "748195364354205412992883669572407326336572018227814456264921612714604158"
        "639498627429271922435874943850073408845077356804210458221993697160809307"
        "770051815868413178217779630515358924428025403569340905685260438576674119"
        "075291568469772018164247847444872028931038640754867599260177485717050778"
        "986352172901469842762323600050397922354596120881210777433831166629698234"
        "20991352344697105133486412456447643502096"
    ),
)


def is_generator(g: int, p: int) -> bool:
    """True if g is not confined to the order-2 subgroup, i.e. g^((p-1)/2) != 1 mod p."""
    return mod_exp(g, (p - 1) // 2, p) != 1


def _sample_element(p: int, rng: RandomSource) -> int:
    return random_in_range(2, p - 2, rng)


def choose_generator(p: int, rng: RandomSource | None = None) -> int:
    source = resolve(rng)
    while True:
        g = _sample_element(p, source)
        if is_generator(g, p):
            return g


def choose_second_generator(p: int, g: int, rng: RandomSource | None = None) -> int:
    """Sample h independently of g; only distinctness from g and 1 is enforced."""
    source = resolve(rng)
    while True:
        h = _sample_element(p, source)
        if h != g and h != 1:
            return h


def _search_prime(source: SafePrimeSource, bits: int, rng: RandomSource, cancel: threading.Event) -> int:
    try:
        return source(bits, rng=rng, cancel=cancel)
    except PrimeGenerationFailure:
        raise
    except Exception as exc:
        raise PrimeGenerationFailure(f"safe prime source failed for {bits} bits: {exc}") from exc


async def generate_parameters(
    bits: int | None = None,
    *,
    prime_source: SafePrimeSource | None = None,
    rng: RandomSource | None = None,
) -> Parameters:
    """Generate a fresh {p, g, h} triple with a bits-bit safe prime modulus.

    The prime search runs in the loop's default executor. Cancelling the
    awaiting task signals the search to stop; nothing needs rolling back.
    """
    if bits is None:
        bits = SETTINGS.default_bits
    source = generate_safe_prime if prime_source is None else prime_source
    rand = resolve(rng)
    cancel = threading.Event()
    loop = asyncio.get_running_loop()

    logger.debug("generating %d-bit Pedersen parameters", bits)
    try:
        p = await loop.run_in_executor(None, functools.partial(_search_prime, source, bits, rand, cancel))
    except asyncio.CancelledError:
        cancel.set()
        raise
    if p < 5:
        raise PrimeGenerationFailure(f"safe prime source returned unusable modulus {p}")

    g = choose_generator(p, rand)
    h = choose_second_generator(p, g, rand)
    logger.debug("selected generators for %d-bit modulus", p.bit_length())
    return Parameters(p=p, g=g, h=h)


def generate_parameters_sync(
    bits: int | None = None,
    *,
    prime_source: SafePrimeSource | None = None,
    rng: RandomSource | None = None,
) -> Parameters:
    """Blocking wrapper around generate_parameters for code without an event loop."""
    return asyncio.run(generate_parameters(bits, prime_source=prime_source, rng=rng))


def check_parameters(params: Parameters, rounds: int | None = None, rng: RandomSource | None = None) -> None:
    """Raise InvalidInput unless params form a usable Pedersen triple."""
    p, g, h = params.p, params.g, params.h
    if not is_safe_prime(p, rounds, rng):
        raise InvalidInput("p is not a safe prime")
    for name, value in (("g", g), ("h", h)):
        if not 2 <= value <= p - 2:
            raise InvalidInput(f"{name} must lie in [2, p-2]")
    if g == h:
        raise InvalidInput("g and h must be distinct")
    if not is_generator(g, p):
        raise InvalidInput("g lies in the order-2 subgroup")


__all__ = [
    "Parameters",
    "DEFAULT_PARAMETERS",
    "is_generator",
    "choose_generator",
    "choose_second_generator",
    "generate_parameters",
    "generate_parameters_sync",
    "check_parameters",
]
