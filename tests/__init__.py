# On recent windowses there is no localhost entry in hosts file,
# hence localhost resolves fail. https://github.com/c-ares/c-ares/issues/85
localhost = '127.0.0.1'
