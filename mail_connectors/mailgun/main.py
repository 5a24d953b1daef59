import json
from mail_connectors.mailgun.api_client import MailgunClient


def main():

# Main pour tester le client Mailgun (MAILGUN_API_KEY / MAILGUN_DOMAIN dans le .env)

    with MailgunClient.from_env() as mailgun:

## Les listes de diffusion

        print("\n⏳ Récupération des listes de diffusion...\n")
        for ml in mailgun.lists():
            print(json.dumps(ml.model_dump(), indent=2, ensure_ascii=False))

## Envoi d'un message

        to = input("📧 Destinataire du message de test (vide pour ignorer) : ").strip()
        if to:
            res = mailgun.message({
                "from": f"test@{mailgun.domain}",
                "to": to,
                "subject": "test",
                "text": "text",
            })
            print(f"✅ {res.message} ({res.id})")


if __name__ == "__main__":
    main()
