"""
Main client for the call2all SDK
"""

import httpx
import logging
from typing import Any, Mapping, Optional, TypedDict
from .constants import *
from .exceptions import ConfigError
from .store import Store, MemoryStore, TokenStorage
from .utils import build_query, compact, fill, stringify

# Keep httpx quiet, its INFO lines include full request URLs
logging.getLogger("httpx").setLevel(logging.WARNING)

# Module logger
logger = logging.getLogger(__name__)

OPTIONS = {'base_url', 'timeout', 'token_store', 'transport', 'session'}

class LoginResponse(TypedDict, total=False):
    token: str

class Call2AllClient:
    """Async client for the call2all ym API.

    Every method issues exactly one request and returns the decoded JSON body
    as received. Application errors (bad credentials, expired token, MFA
    required) arrive inside that body and are left to the caller. Transport
    and JSON decoding errors propagate unchanged.
    """

    def __init__(self, options=None):
        options = dict(options or {})
        self._validate_options(options)

        self.base_url = options.get('base_url', BASE_URL).rstrip('/')
        self.tokens = TokenStorage(options.get('token_store', MemoryStore()))

        session = options.get('session')
        self._owns_session = session is None
        if session is None:
            client_kwargs = {}
            if 'timeout' in options:
                client_kwargs['timeout'] = options['timeout']
            if options.get('transport') is not None:
                client_kwargs['transport'] = options['transport']
            session = httpx.AsyncClient(**client_kwargs)
        self.session = session
        # An injected session is used as given, never modified
        if self._owns_session:
            self.session.headers.update({
                'Accept': 'application/json'
            })
            # Register hooks
            self.session.event_hooks['request'] = [self._before_request]

    def _validate_options(self, options):
        """Validate client configuration options"""
        unknown = set(options) - OPTIONS
        if unknown:
            raise ConfigError(f'Unknown options: {", ".join(sorted(unknown))}')
        if options.get('session') is not None:
            conflicting = {'timeout', 'transport'} & set(options)
            if conflicting:
                raise ConfigError(f'session cannot be combined with: {", ".join(sorted(conflicting))}')
        store = options.get('token_store')
        if store is not None and not isinstance(store, Store):
            raise ConfigError('token_store must be a Store instance')

    async def _before_request(self, request):
        """Handle request before sending"""
        # The query carries credentials and tokens, log the path only
        logger.debug('%s %s', request.method, request.url.path)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self):
        """Close the underlying session if this client created it"""
        if self._owns_session:
            await self.session.aclose()

    def _url(self, endpoint, query=''):
        url = f'{self.base_url}/{endpoint}'
        return f'{url}?{query}' if query else url

    async def _get(self, endpoint, first, form=None):
        response = await self.session.get(self._url(endpoint, build_query(first, form)))
        return response.json()

    async def _post_json(self, endpoint, body):
        response = await self.session.post(self._url(endpoint), json=body)
        return response.json()

    async def _mfa(self, token, action, form=None):
        return await self._get(MFA_SESSION, [('token', token), ('action', action)], form)

    async def login(self, username: str, password: str) -> LoginResponse:
        """Exchange credentials for a token; the body is normally {"token": ...}"""
        return await self._get(LOGIN, [('username', username), ('password', password)])

    async def get_session(self, token: str) -> Any:
        return await self._get(GET_SESSION, [('token', token)])

    async def get_incoming_sms(self, token: str, limit) -> Any:
        return await self._get(GET_INCOMING_SMS, [('token', token), ('limit', limit)])

    async def get_sms_out_log(self, token: str, limit) -> Any:
        return await self._get(GET_SMS_OUT_LOG, [('token', token), ('limit', limit)])

    async def get_text_file(self, token: str, what: str) -> Any:
        return await self._get(GET_TEXT_FILE, [('token', token), ('what', what)])

    async def upload_text_file(self, token: str, what: str, contents) -> Any:
        """
        Upload a text file

        Args:
            token: API token
            what: Remote file path, e.g. "ivr2:/1/ext.ini"
            contents: File body; non-string values are sent as their JSON text

        Returns:
            Decoded JSON response
        """
        return await self._post_json(UPLOAD_TEXT_FILE, {
            'token': token,
            'what': what,
            'contents': stringify(contents),
        })

    async def send_sms(self, token: str, params: Mapping[str, Any]) -> Any:
        """Send an SMS; params holds phones, message and optionally CallerId"""
        return await self._get(SEND_SMS, [('token', token)], compact(params))

    async def mfa_is_pass(self, token: str) -> Any:
        return await self._mfa(token, MFA_IS_PASS)

    async def mfa_try(self, token: str) -> Any:
        return await self._mfa(token, MFA_TRY)

    async def mfa_get_methods(self, token: str) -> Any:
        return await self._mfa(token, MFA_GET_METHODS)

    async def mfa_send(self, token: str, mfa_id, mfa_send_type, lang: str = DEFAULT_LANG,
                       auto_otp_hostname: Optional[str] = None) -> Any:
        """Request an MFA code; autoOtpHostname is sent only when given"""
        form = {
            'mfaId': mfa_id,
            'mfaSendType': mfa_send_type,
            'lang': lang,
        }
        if auto_otp_hostname:
            form['autoOtpHostname'] = auto_otp_hostname
        return await self._mfa(token, MFA_SEND, fill(form))

    async def mfa_validate(self, token: str, mfa_code, mfa_remember_me: bool = False,
                           mfa_remember_note: str = '') -> Any:
        return await self._mfa(token, MFA_VALIDATE, fill({
            'mfaCode': mfa_code,
            'mfaRememberMe': 1 if mfa_remember_me else 0,
            'mfaRememberNote': mfa_remember_note,
        }))

    async def mfa_action(self, token: str, action: str,
                         params: Optional[Mapping[str, Any]] = None) -> Any:
        """Run any MFASession action; None-valued params are left out"""
        return await self._mfa(token, action, compact(params))
