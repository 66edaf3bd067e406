import numpy as np

import textures.cache as cache_module
from textures import TextureCache, TextureRequest


class _CountingSynth:
    def __init__(self, image=None):
        self.calls = 0
        self.image = image

    def __call__(self, request):
        self.calls += 1
        if self.image is not None:
            return self.image.copy()
        return np.full((4, 4, 4), request.seed or 0, dtype=np.uint8)


def test_hit_returns_same_array(monkeypatch):
    synth = _CountingSynth()
    monkeypatch.setattr(cache_module, "synthesize", synth)
    cache = TextureCache()
    req = TextureRequest(seed=5, resolution=4)
    a = cache.get(req)
    b = cache.get(req)
    assert a is b
    assert synth.calls == 1
    assert (cache.hits, cache.misses) == (1, 1)
    assert not a.flags.writeable


def test_oldest_entry_is_evicted(monkeypatch):
    monkeypatch.setattr(cache_module, "synthesize", _CountingSynth())
    cache = TextureCache(cache_size=2)
    reqs = [TextureRequest(seed=i, resolution=4) for i in range(3)]
    for r in reqs:
        cache.get(r)
    assert len(cache) == 2
    assert reqs[0] not in cache
    assert reqs[2] in cache


def test_failures_are_not_cached(monkeypatch):
    synth = _CountingSynth(np.zeros((0, 0, 4), dtype=np.uint8))
    monkeypatch.setattr(cache_module, "synthesize", synth)
    cache = TextureCache()
    req = TextureRequest(resolution=0)
    assert cache.get(req).size == 0
    assert cache.get(req).size == 0
    assert synth.calls == 2
    assert len(cache) == 0


def test_real_synthesis_round_trip():
    cache = TextureCache()
    req = TextureRequest("#d1541e", "mars", resolution=16, seed=1)
    image = cache.get(req)
    assert image.shape == (16, 16, 4)
    assert req in cache
    cache.clear()
    assert len(cache) == 0
