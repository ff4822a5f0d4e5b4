"""Counters published by varnishd in its shared statistics segment.

Mirrors the field list of ``stat_field.h``: every name that ``varnishstat -1``
prints in its left column, paired with the description it prints on the
right. The order is the order varnishstat lists them in.
"""

from __future__ import annotations

from domain.models import CounterField

COUNTER_FIELDS: tuple[CounterField, ...] = (
    CounterField("client_conn", "Client connections accepted"),
    CounterField("client_drop", "Connection dropped, no sess"),
    CounterField("client_req", "Client requests received"),
    CounterField("cache_hit", "Cache hits"),
    CounterField("cache_hitpass", "Cache hits for pass"),
    CounterField("cache_miss", "Cache misses"),
    CounterField("backend_conn", "Backend connections success"),
    CounterField("backend_unhealthy", "Backend connections not attempted"),
    CounterField("backend_busy", "Backend connections too many"),
    CounterField("backend_fail", "Backend connections failures"),
    CounterField("backend_reuse", "Backend connections reuses"),
    CounterField("backend_recycle", "Backend connections recycles"),
    CounterField("backend_unused", "Backend connections unused"),
    CounterField("n_srcaddr", "N struct srcaddr"),
    CounterField("n_srcaddr_act", "N active struct srcaddr"),
    CounterField("n_sess_mem", "N struct sess_mem"),
    CounterField("n_sess", "N struct sess"),
    CounterField("n_object", "N struct object"),
    CounterField("n_objecthead", "N struct objecthead"),
    CounterField("n_smf", "N struct smf"),
    CounterField("n_smf_frag", "N small free smf"),
    CounterField("n_smf_large", "N large free smf"),
    CounterField("n_vbe_conn", "N struct vbe_conn"),
    CounterField("n_bereq", "N struct bereq"),
    CounterField("n_wrk", "N worker threads"),
    CounterField("n_wrk_create", "N worker threads created"),
    CounterField("n_wrk_failed", "N worker threads not created"),
    CounterField("n_wrk_max", "N worker threads limited"),
    CounterField("n_wrk_queue", "N queued work requests"),
    CounterField("n_wrk_overflow", "N overflowed work requests"),
    CounterField("n_wrk_drop", "N dropped work requests"),
    CounterField("n_backend", "N backends"),
    CounterField("n_expired", "N expired objects"),
    CounterField("n_lru_nuked", "N LRU nuked objects"),
    CounterField("n_lru_saved", "N LRU saved objects"),
    CounterField("n_lru_moved", "N LRU moved objects"),
    CounterField("n_deathrow", "N objects on deathrow"),
    CounterField("losthdr", "HTTP header overflows"),
    CounterField("n_objsendfile", "Objects sent with sendfile"),
    CounterField("n_objwrite", "Objects sent with write"),
    CounterField("n_objoverflow", "Objects overflowing workspace"),
    CounterField("s_sess", "Total Sessions"),
    CounterField("s_req", "Total Requests"),
    CounterField("s_pipe", "Total pipe"),
    CounterField("s_pass", "Total pass"),
    CounterField("s_fetch", "Total fetch"),
    CounterField("s_hdrbytes", "Total header bytes"),
    CounterField("s_bodybytes", "Total body bytes"),
    CounterField("sess_closed", "Session Closed"),
    CounterField("sess_pipeline", "Session Pipeline"),
    CounterField("sess_readahead", "Session Read Ahead"),
    CounterField("sess_linger", "Session Linger"),
    CounterField("sess_herd", "Session herd"),
    CounterField("shm_records", "SHM records"),
    CounterField("shm_writes", "SHM writes"),
    CounterField("shm_flushes", "SHM flushes due to overflow"),
    CounterField("shm_cont", "SHM MTX contention"),
    CounterField("shm_cycles", "SHM cycles through buffer"),
    CounterField("sm_nreq", "allocator requests"),
    CounterField("sm_nobj", "outstanding allocations"),
    CounterField("sm_balloc", "bytes allocated"),
    CounterField("sm_bfree", "bytes free"),
    CounterField("sma_nreq", "SMA allocator requests"),
    CounterField("sma_nobj", "SMA outstanding allocations"),
    CounterField("sma_nbytes", "SMA outstanding bytes"),
    CounterField("sma_balloc", "SMA bytes allocated"),
    CounterField("sma_bfree", "SMA bytes free"),
    CounterField("sms_nreq", "SMS allocator requests"),
    CounterField("sms_nobj", "SMS outstanding allocations"),
    CounterField("sms_nbytes", "SMS outstanding bytes"),
    CounterField("sms_balloc", "SMS bytes allocated"),
    CounterField("sms_bfree", "SMS bytes freed"),
    CounterField("backend_req", "Backend requests made"),
    CounterField("n_vcl", "N vcl total"),
    CounterField("n_vcl_avail", "N vcl available"),
    CounterField("n_vcl_discard", "N vcl discarded"),
    CounterField("n_purge", "N total active purges"),
    CounterField("n_purge_add", "N new purges added"),
    CounterField("n_purge_retire", "N old purges deleted"),
    CounterField("n_purge_obj_test", "N objects tested"),
    CounterField("n_purge_re_test", "N regexps tested against"),
    CounterField("n_purge_dups", "N duplicate purges removed"),
    CounterField("hcb_nolock", "HCB Lookups without lock"),
    CounterField("hcb_lock", "HCB Lookups with lock"),
    CounterField("hcb_insert", "HCB Inserts"),
    CounterField("esi_parse", "Objects ESI parsed (Unlock)"),
    CounterField("esi_errors", "ESI parse errors (unlock)"),
    CounterField("accept_fail", "Accept failures"),
    CounterField("client_drop_late", "Connection dropped late"),
    CounterField("uptime", "Client uptime"),
)

FIELDS_BY_NAME: dict[str, CounterField] = {f.name: f for f in COUNTER_FIELDS}

HIT_COUNTER = "cache_hit"
MISS_COUNTER = "cache_miss"


def lookup_field(name: str) -> CounterField | None:
    """Return the known field called *name*, or ``None``."""
    return FIELDS_BY_NAME.get(name)
