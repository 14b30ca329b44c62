from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class CommandHelp(BaseModel):
    """Usage information for a single server command."""

    name: str = Field(..., description="Upper-case command name, e.g. 'GET'.")
    params: str = Field("-", description="Argument synopsis.")
    group: str = Field(..., description="Command group, e.g. 'string'.")


_RAW_TABLE = [
    # --- generic ---
    ("COPY", "source destination [DB destination-db] [REPLACE]", "generic"),
    ("DEL", "key [key ...]", "generic"),
    ("DUMP", "key", "generic"),
    ("EXISTS", "key [key ...]", "generic"),
    ("EXPIRE", "key seconds [NX|XX|GT|LT]", "generic"),
    ("EXPIREAT", "key unix-time-seconds [NX|XX|GT|LT]", "generic"),
    ("EXPIRETIME", "key", "generic"),
    ("KEYS", "pattern", "generic"),
    ("MIGRATE", "host port key|\"\" destination-db timeout [COPY] [REPLACE]", "generic"),
    ("MOVE", "key db", "generic"),
    ("OBJECT", "subcommand [arguments [arguments ...]]", "generic"),
    ("PERSIST", "key", "generic"),
    ("PEXPIRE", "key milliseconds [NX|XX|GT|LT]", "generic"),
    ("PEXPIREAT", "key unix-time-milliseconds [NX|XX|GT|LT]", "generic"),
    ("PTTL", "key", "generic"),
    ("RANDOMKEY", "-", "generic"),
    ("RENAME", "key newkey", "generic"),
    ("RENAMENX", "key newkey", "generic"),
    ("RESTORE", "key ttl serialized-value [REPLACE] [ABSTTL]", "generic"),
    ("SCAN", "cursor [MATCH pattern] [COUNT count] [TYPE type]", "generic"),
    ("SORT", "key [BY pattern] [LIMIT offset count] [GET pattern [GET pattern ...]] [ASC|DESC] [ALPHA] [STORE destination]", "generic"),
    ("TOUCH", "key [key ...]", "generic"),
    ("TTL", "key", "generic"),
    ("TYPE", "key", "generic"),
    ("UNLINK", "key [key ...]", "generic"),
    ("WAIT", "numreplicas timeout", "generic"),
    # --- string ---
    ("APPEND", "key value", "string"),
    ("DECR", "key", "string"),
    ("DECRBY", "key decrement", "string"),
    ("GET", "key", "string"),
    ("GETDEL", "key", "string"),
    ("GETEX", "key [EX seconds|PX milliseconds|EXAT unix-time|PXAT unix-time|PERSIST]", "string"),
    ("GETRANGE", "key start end", "string"),
    ("GETSET", "key value", "string"),
    ("INCR", "key", "string"),
    ("INCRBY", "key increment", "string"),
    ("INCRBYFLOAT", "key increment", "string"),
    ("LCS", "key1 key2 [LEN] [IDX] [MINMATCHLEN len] [WITHMATCHLEN]", "string"),
    ("MGET", "key [key ...]", "string"),
    ("MSET", "key value [key value ...]", "string"),
    ("MSETNX", "key value [key value ...]", "string"),
    ("PSETEX", "key milliseconds value", "string"),
    ("SET", "key value [NX|XX] [GET] [EX seconds|PX milliseconds|EXAT unix-time|PXAT unix-time|KEEPTTL]", "string"),
    ("SETEX", "key seconds value", "string"),
    ("SETNX", "key value", "string"),
    ("SETRANGE", "key offset value", "string"),
    ("STRLEN", "key", "string"),
    # --- bitmap ---
    ("BITCOUNT", "key [start end [BYTE|BIT]]", "bitmap"),
    ("BITFIELD", "key [GET encoding offset] [SET encoding offset value] [INCRBY encoding offset increment] [OVERFLOW WRAP|SAT|FAIL]", "bitmap"),
    ("BITOP", "operation destkey key [key ...]", "bitmap"),
    ("BITPOS", "key bit [start [end [BYTE|BIT]]]", "bitmap"),
    ("GETBIT", "key offset", "bitmap"),
    ("SETBIT", "key offset value", "bitmap"),
    # --- list ---
    ("BLMOVE", "source destination LEFT|RIGHT LEFT|RIGHT timeout", "list"),
    ("BLPOP", "key [key ...] timeout", "list"),
    ("BRPOP", "key [key ...] timeout", "list"),
    ("LINDEX", "key index", "list"),
    ("LINSERT", "key BEFORE|AFTER pivot element", "list"),
    ("LLEN", "key", "list"),
    ("LMOVE", "source destination LEFT|RIGHT LEFT|RIGHT", "list"),
    ("LPOP", "key [count]", "list"),
    ("LPOS", "key element [RANK rank] [COUNT num-matches] [MAXLEN len]", "list"),
    ("LPUSH", "key element [element ...]", "list"),
    ("LPUSHX", "key element [element ...]", "list"),
    ("LRANGE", "key start stop", "list"),
    ("LREM", "key count element", "list"),
    ("LSET", "key index element", "list"),
    ("LTRIM", "key start stop", "list"),
    ("RPOP", "key [count]", "list"),
    ("RPOPLPUSH", "source destination", "list"),
    ("RPUSH", "key element [element ...]", "list"),
    ("RPUSHX", "key element [element ...]", "list"),
    # --- set ---
    ("SADD", "key member [member ...]", "set"),
    ("SCARD", "key", "set"),
    ("SDIFF", "key [key ...]", "set"),
    ("SDIFFSTORE", "destination key [key ...]", "set"),
    ("SINTER", "key [key ...]", "set"),
    ("SINTERCARD", "numkeys key [key ...] [LIMIT limit]", "set"),
    ("SINTERSTORE", "destination key [key ...]", "set"),
    ("SISMEMBER", "key member", "set"),
    ("SMEMBERS", "key", "set"),
    ("SMISMEMBER", "key member [member ...]", "set"),
    ("SMOVE", "source destination member", "set"),
    ("SPOP", "key [count]", "set"),
    ("SRANDMEMBER", "key [count]", "set"),
    ("SREM", "key member [member ...]", "set"),
    ("SSCAN", "key cursor [MATCH pattern] [COUNT count]", "set"),
    ("SUNION", "key [key ...]", "set"),
    ("SUNIONSTORE", "destination key [key ...]", "set"),
    # --- sorted_set ---
    ("BZPOPMAX", "key [key ...] timeout", "sorted_set"),
    ("BZPOPMIN", "key [key ...] timeout", "sorted_set"),
    ("ZADD", "key [NX|XX] [GT|LT] [CH] [INCR] score member [score member ...]", "sorted_set"),
    ("ZCARD", "key", "sorted_set"),
    ("ZCOUNT", "key min max", "sorted_set"),
    ("ZDIFF", "numkeys key [key ...] [WITHSCORES]", "sorted_set"),
    ("ZINCRBY", "key increment member", "sorted_set"),
    ("ZINTER", "numkeys key [key ...] [WEIGHTS weight [weight ...]] [AGGREGATE SUM|MIN|MAX] [WITHSCORES]", "sorted_set"),
    ("ZINTERSTORE", "destination numkeys key [key ...] [WEIGHTS weight [weight ...]] [AGGREGATE SUM|MIN|MAX]", "sorted_set"),
    ("ZLEXCOUNT", "key min max", "sorted_set"),
    ("ZMSCORE", "key member [member ...]", "sorted_set"),
    ("ZPOPMAX", "key [count]", "sorted_set"),
    ("ZPOPMIN", "key [count]", "sorted_set"),
    ("ZRANDMEMBER", "key [count [WITHSCORES]]", "sorted_set"),
    ("ZRANGE", "key start stop [BYSCORE|BYLEX] [REV] [LIMIT offset count] [WITHSCORES]", "sorted_set"),
    ("ZRANGEBYLEX", "key min max [LIMIT offset count]", "sorted_set"),
    ("ZRANGEBYSCORE", "key min max [WITHSCORES] [LIMIT offset count]", "sorted_set"),
    ("ZRANK", "key member [WITHSCORE]", "sorted_set"),
    ("ZREM", "key member [member ...]", "sorted_set"),
    ("ZREMRANGEBYLEX", "key min max", "sorted_set"),
    ("ZREMRANGEBYRANK", "key start stop", "sorted_set"),
    ("ZREMRANGEBYSCORE", "key min max", "sorted_set"),
    ("ZREVRANGE", "key start stop [WITHSCORES]", "sorted_set"),
    ("ZREVRANGEBYSCORE", "key max min [WITHSCORES] [LIMIT offset count]", "sorted_set"),
    ("ZREVRANK", "key member [WITHSCORE]", "sorted_set"),
    ("ZSCAN", "key cursor [MATCH pattern] [COUNT count]", "sorted_set"),
    ("ZSCORE", "key member", "sorted_set"),
    ("ZUNION", "numkeys key [key ...] [WEIGHTS weight [weight ...]] [AGGREGATE SUM|MIN|MAX] [WITHSCORES]", "sorted_set"),
    ("ZUNIONSTORE", "destination numkeys key [key ...] [WEIGHTS weight [weight ...]] [AGGREGATE SUM|MIN|MAX]", "sorted_set"),
    # --- hash ---
    ("HDEL", "key field [field ...]", "hash"),
    ("HEXISTS", "key field", "hash"),
    ("HGET", "key field", "hash"),
    ("HGETALL", "key", "hash"),
    ("HINCRBY", "key field increment", "hash"),
    ("HINCRBYFLOAT", "key field increment", "hash"),
    ("HKEYS", "key", "hash"),
    ("HLEN", "key", "hash"),
    ("HMGET", "key field [field ...]", "hash"),
    ("HMSET", "key field value [field value ...]", "hash"),
    ("HRANDFIELD", "key [count [WITHVALUES]]", "hash"),
    ("HSCAN", "key cursor [MATCH pattern] [COUNT count]", "hash"),
    ("HSET", "key field value [field value ...]", "hash"),
    ("HSETNX", "key field value", "hash"),
    ("HSTRLEN", "key field", "hash"),
    ("HVALS", "key", "hash"),
    # --- pubsub ---
    ("PSUBSCRIBE", "pattern [pattern ...]", "pubsub"),
    ("PUBLISH", "channel message", "pubsub"),
    ("PUBSUB", "subcommand [argument [argument ...]]", "pubsub"),
    ("PUNSUBSCRIBE", "[pattern [pattern ...]]", "pubsub"),
    ("SUBSCRIBE", "channel [channel ...]", "pubsub"),
    ("UNSUBSCRIBE", "[channel [channel ...]]", "pubsub"),
    # --- transactions ---
    ("DISCARD", "-", "transactions"),
    ("EXEC", "-", "transactions"),
    ("MULTI", "-", "transactions"),
    ("UNWATCH", "-", "transactions"),
    ("WATCH", "key [key ...]", "transactions"),
    # --- connection ---
    ("AUTH", "[username] password", "connection"),
    ("CLIENT", "subcommand [arguments [arguments ...]]", "connection"),
    ("ECHO", "message", "connection"),
    ("HELLO", "[protover [AUTH username password] [SETNAME clientname]]", "connection"),
    ("PING", "[message]", "connection"),
    ("QUIT", "-", "connection"),
    ("RESET", "-", "connection"),
    ("SELECT", "index", "connection"),
    # --- server ---
    ("ACL", "subcommand [arguments [arguments ...]]", "server"),
    ("BGREWRITEAOF", "-", "server"),
    ("BGSAVE", "[SCHEDULE]", "server"),
    ("COMMAND", "[subcommand [arguments [arguments ...]]]", "server"),
    ("CONFIG", "subcommand [arguments [arguments ...]]", "server"),
    ("DBSIZE", "-", "server"),
    ("DEBUG", "subcommand [arguments [arguments ...]]", "server"),
    ("FLUSHALL", "[ASYNC|SYNC]", "server"),
    ("FLUSHDB", "[ASYNC|SYNC]", "server"),
    ("INFO", "[section [section ...]]", "server"),
    ("LASTSAVE", "-", "server"),
    ("LATENCY", "subcommand [arguments [arguments ...]]", "server"),
    ("LOLWUT", "[VERSION version]", "server"),
    ("MEMORY", "subcommand [arguments [arguments ...]]", "server"),
    ("MONITOR", "-", "server"),
    ("REPLICAOF", "host port", "server"),
    ("ROLE", "-", "server"),
    ("SAVE", "-", "server"),
    ("SHUTDOWN", "[NOSAVE|SAVE] [NOW] [FORCE] [ABORT]", "server"),
    ("SLAVEOF", "host port", "server"),
    ("SLOWLOG", "subcommand [arguments [arguments ...]]", "server"),
    ("SWAPDB", "index1 index2", "server"),
    ("SYNC", "-", "server"),
    ("TIME", "-", "server"),
    # --- scripting ---
    ("EVAL", "script numkeys [key [key ...]] [arg [arg ...]]", "scripting"),
    ("EVALSHA", "sha1 numkeys [key [key ...]] [arg [arg ...]]", "scripting"),
    ("FCALL", "function numkeys [key [key ...]] [arg [arg ...]]", "scripting"),
    ("FUNCTION", "subcommand [arguments [arguments ...]]", "scripting"),
    ("SCRIPT", "subcommand [arguments [arguments ...]]", "scripting"),
    # --- hyperloglog ---
    ("PFADD", "key [element [element ...]]", "hyperloglog"),
    ("PFCOUNT", "key [key ...]", "hyperloglog"),
    ("PFMERGE", "destkey [sourcekey [sourcekey ...]]", "hyperloglog"),
    # --- cluster ---
    ("ASKING", "-", "cluster"),
    ("CLUSTER", "subcommand [arguments [arguments ...]]", "cluster"),
    ("READONLY", "-", "cluster"),
    ("READWRITE", "-", "cluster"),
    # --- geo ---
    ("GEOADD", "key [NX|XX] [CH] longitude latitude member [longitude latitude member ...]", "geo"),
    ("GEODIST", "key member1 member2 [M|KM|FT|MI]", "geo"),
    ("GEOHASH", "key [member [member ...]]", "geo"),
    ("GEOPOS", "key [member [member ...]]", "geo"),
    ("GEOSEARCH", "key FROMMEMBER member|FROMLONLAT longitude latitude BYRADIUS radius M|KM|FT|MI|BYBOX width height M|KM|FT|MI [ASC|DESC] [COUNT count [ANY]] [WITHCOORD] [WITHDIST] [WITHHASH]", "geo"),
    ("GEOSEARCHSTORE", "destination source FROMMEMBER member|FROMLONLAT longitude latitude BYRADIUS radius M|KM|FT|MI|BYBOX width height M|KM|FT|MI [ASC|DESC] [COUNT count [ANY]] [STOREDIST]", "geo"),
    # --- stream ---
    ("XACK", "key group id [id ...]", "stream"),
    ("XADD", "key [NOMKSTREAM] [MAXLEN|MINID [=|~] threshold [LIMIT count]] *|id field value [field value ...]", "stream"),
    ("XAUTOCLAIM", "key group consumer min-idle-time start [COUNT count] [JUSTID]", "stream"),
    ("XCLAIM", "key group consumer min-idle-time id [id ...] [IDLE ms] [TIME unix-time-milliseconds] [RETRYCOUNT count] [FORCE] [JUSTID]", "stream"),
    ("XDEL", "key id [id ...]", "stream"),
    ("XGROUP", "subcommand [arguments [arguments ...]]", "stream"),
    ("XINFO", "subcommand [arguments [arguments ...]]", "stream"),
    ("XLEN", "key", "stream"),
    ("XPENDING", "key group [[IDLE min-idle-time] start end count [consumer]]", "stream"),
    ("XRANGE", "key start end [COUNT count]", "stream"),
    ("XREAD", "[COUNT count] [BLOCK milliseconds] STREAMS key [key ...] id [id ...]", "stream"),
    ("XREADGROUP", "GROUP group consumer [COUNT count] [BLOCK milliseconds] [NOACK] STREAMS key [key ...] id [id ...]", "stream"),
    ("XREVRANGE", "key end start [COUNT count]", "stream"),
    ("XTRIM", "key MAXLEN|MINID [=|~] threshold [LIMIT count]", "stream"),
]

HELP_COMMANDS: List[CommandHelp] = [
    CommandHelp(name=name, params=params, group=group)
    for name, params, group in _RAW_TABLE
]

_BY_NAME: Dict[str, CommandHelp] = {entry.name: entry for entry in HELP_COMMANDS}


def lookup(name: str) -> Optional[CommandHelp]:
    """Finds the help entry for a command name, case-insensitively."""
    return _BY_NAME.get(name.upper())


def commands_in_group(group: str) -> List[CommandHelp]:
    group = group.lower()
    return [entry for entry in HELP_COMMANDS if entry.group == group]

