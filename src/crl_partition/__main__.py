from crl_partition.main import main

main()
