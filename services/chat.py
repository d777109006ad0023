"""Client for the Gemini generative-language REST API.

Only the narrow ``complete(prompt) -> text`` surface is exposed so the rest
of the app never sees the vendor's wire format.
"""
import logging

import requests

from errors import UpstreamError

logger = logging.getLogger(__name__)

UNEXPECTED_FORMAT = 'Unexpected API response format.'


class GeminiClient:
    def __init__(self, api_key, model='gemini-2.5-pro',
                 base_url='https://generativelanguage.googleapis.com/v1beta', timeout=60,
                 session=None):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config):
        return cls(
            config['GEMINI_API_KEY'],
            model=config['GEMINI_MODEL'],
            base_url=config['GEMINI_API_URL'],
            timeout=config['CHAT_TIMEOUT'],
        )

    def _request(self, method, path, **kwargs):
        if not self.api_key:
            raise UpstreamError('Chat assistant is not configured.')
        url = f'{self.base_url}/{path}'
        try:
            response = self.session.request(
                method, url, params={'key': self.api_key}, timeout=self.timeout, **kwargs
            )
        except requests.exceptions.RequestException as e:
            logger.error('Gemini request error: %s', e)
            raise UpstreamError(f'Request Error: {e}')

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not response.ok:
            logger.error('Gemini API error (%s): %s', response.status_code, data)
            detail = (data.get('error') or {}).get('message') or 'Unknown error'
            raise UpstreamError(f'API Error: {detail}')
        return data

    def complete(self, prompt):
        payload = {'contents': [{'parts': [{'text': prompt}]}]}
        data = self._request('POST', f'models/{self.model}:generateContent', json=payload)
        try:
            return data['candidates'][0]['content']['parts'][0]['text']
        except (KeyError, IndexError, TypeError):
            return UNEXPECTED_FORMAT

    def list_models(self):
        """Names of models that support ``generateContent``."""
        data = self._request('GET', 'models')
        return [
            m['name'] for m in data.get('models', [])
            if 'generateContent' in m.get('supportedGenerationMethods', [])
        ]
