from rest_framework.renderers import JSONRenderer


class EnvelopeJSONRenderer(JSONRenderer):
    """
    Wrap every JSON body in the envelope the mobile client expects.

    Success: {"success": true, "data": ...}
    Failure: {"success": false, "error": "...", "code": "...", "details"?: ...}
    """

    def render(self, data, accepted_media_type=None, renderer_context=None):
        response = (renderer_context or {}).get('response')

        if response is None:
            return super().render(data, accepted_media_type, renderer_context)

        if response.status_code == 204 or (data is None and response.status_code < 400):
            return b''

        if response.status_code >= 400:
            if isinstance(data, dict) and 'error' in data:
                envelope = {'success': False, **data}
            else:
                envelope = {'success': False, 'error': str(data)}
        else:
            envelope = {'success': True, 'data': data}

        return super().render(envelope, accepted_media_type, renderer_context)
