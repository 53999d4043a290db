import urllib.parse
import urllib.request
import zlib
from http import cookiejar


USER_AGENT = "tx-tax-auctions"

_WBITS = {
    "gzip": 16 + zlib.MAX_WBITS,
    "deflate": zlib.MAX_WBITS,
}


class HttpClient:
    def __init__(self, timeout=30, max_bytes=2_000_000):
        self.timeout = timeout
        self.max_bytes = max_bytes
        self._cookies = cookiejar.CookieJar()
        self._opener = urllib.request.build_opener(
            urllib.request.HTTPCookieProcessor(self._cookies),
        )

    def _read_body(self, response):
        data = response.read(self.max_bytes + 1)
        truncated = len(data) > self.max_bytes
        if truncated:
            data = data[: self.max_bytes]
        encoding = response.headers.get("Content-Encoding", "").lower()
        wbits = _WBITS.get(encoding)
        if wbits is None:
            return data, truncated
        # capped bodies lack an end-of-stream marker
        decompressor = zlib.decompressobj(wbits)
        body = decompressor.decompress(data, self.max_bytes + 1)
        if len(body) > self.max_bytes:
            return body[: self.max_bytes], True
        return body, truncated

    def _decode_body(self, data, response):
        charset = "utf-8"
        content_type = response.headers.get("Content-Type", "")
        if "charset=" in content_type:
            charset = content_type.split("charset=")[-1].split(";")[0].strip()
        try:
            return data.decode(charset, errors="replace")
        except LookupError:
            return data.decode("utf-8", errors="replace")

    def build_form_request(self, url, form_fields):
        encoded = urllib.parse.urlencode(form_fields or {}).encode("utf-8")
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        return {"url": url, "method": "POST", "data": encoded, "headers": headers}

    def request(self, request_spec, allowed_hosts=None):
        url = request_spec.get("url")
        parsed = urllib.parse.urlparse(url)
        if parsed.scheme in ("file", ""):
            with open(urllib.request.url2pathname(parsed.path), "rb") as handle:
                data = handle.read(self.max_bytes)
            return {
                "text": data.decode("utf-8", errors="replace"),
                "final_url": url,
                "truncated": False,
                "status": 200,
            }
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "text/html,application/xhtml+xml",
            "Accept-Encoding": "gzip, deflate",
        }
        headers.update(request_spec.get("headers") or {})
        req = urllib.request.Request(
            url,
            headers=headers,
            data=request_spec.get("data"),
            method=request_spec.get("method", "GET"),
        )
        with self._opener.open(req, timeout=self.timeout) as response:
            final_url = response.geturl()
            final_host = urllib.parse.urlparse(final_url).hostname
            if allowed_hosts is not None and final_host not in allowed_hosts:
                raise ValueError(f"Redirected to host outside allowlist: {final_host}")
            status = getattr(response, "status", 200)
            data_bytes, truncated = self._read_body(response)
            return {
                "text": self._decode_body(data_bytes, response),
                "final_url": final_url,
                "truncated": truncated,
                "status": status,
            }
