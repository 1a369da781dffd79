"""
Constants used throughout the call2all SDK
"""

# URLs
BASE_URL = 'https://www.call2all.co.il/ym/api'

# Endpoints
LOGIN = 'Login'
GET_SESSION = 'GetSession'
GET_INCOMING_SMS = 'GetIncomingSms'
GET_SMS_OUT_LOG = 'GetSmsOutLog'
GET_TEXT_FILE = 'GetTextFile'
UPLOAD_TEXT_FILE = 'UploadTextFile'
SEND_SMS = 'SendSms'
MFA_SESSION = 'MFASession'

# MFASession actions
MFA_IS_PASS = 'isPass'
MFA_TRY = 'try'
MFA_GET_METHODS = 'getMFAMethods'
MFA_SEND = 'sendMFA'
MFA_VALIDATE = 'validMFA'

DEFAULT_LANG = 'HE'

# Token storage
TOKEN_STORAGE_KEY = 'apiToken'
