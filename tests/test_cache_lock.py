"""
Cache lock tests against the configured Django cache.
"""
from django.core.cache import cache

from apps.orders.application.use_cases.place_order import checkout_lock
from shared.infrastructure.cache.redis_cache import CacheLock, RedisCache


def test_second_acquire_on_same_key_fails():
    first = CacheLock(RedisCache(prefix='test'), key='a', timeout=30)
    second = CacheLock(RedisCache(prefix='test'), key='a', timeout=30)

    assert first.acquire() is True
    assert second.acquire() is False
    assert first.held
    assert not second.held


def test_release_frees_the_key():
    first = CacheLock(RedisCache(prefix='test'), key='a')
    first.acquire()
    first.release()

    assert cache.get('test:a') is None
    assert CacheLock(RedisCache(prefix='test'), key='a').acquire() is True


def test_release_without_holding_keeps_other_lock():
    owner = CacheLock(RedisCache(prefix='test'), key='a')
    owner.acquire()
    loser = CacheLock(RedisCache(prefix='test'), key='a')
    loser.acquire()
    loser.release()

    assert cache.get('test:a') == '1'


def test_checkout_locks_are_per_user():
    first_user = checkout_lock(1)
    assert first_user.acquire()

    assert checkout_lock(2).acquire() is True
    assert checkout_lock(1).acquire() is False
    assert cache.get('checkout:1') == '1'

    first_user.release()
    assert checkout_lock(1).acquire() is True
